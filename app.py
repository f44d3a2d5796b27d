import logging

import gradio as gr

from formula_editor.handlers_formulas import EXPORT_FORMATS, export_formulas_handler, load_formula_file
from formula_editor.handlers_templates import (
    export_template_library_handler,
    load_template_file,
    preview_category_handler,
)

# --- UI Definition ---
with gr.Blocks(title="Formula Editor") as demo:
    gr.Markdown("# Formula Editor")
    gr.Markdown("Import formula collections and template libraries, then export them as LaTeX, Markdown, text or JSON.")

    # State
    formulas_state = gr.State()
    template_library_state = gr.State()

    with gr.Tab("Formulas"):
        with gr.Row():
            with gr.Column(scale=1):
                gr.Markdown("### 1. Import")
                formula_file = gr.File(label="Formula Collection (JSON)", file_types=[".json"])
                formula_status = gr.Textbox(label="Status", interactive=False)
                formula_preview = gr.JSON(label="Formulas")

            with gr.Column(scale=1):
                gr.Markdown("### 2. Export")
                output_format = gr.Radio(choices=list(EXPORT_FORMATS), value="LaTeX", label="Output Format")
                output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="formulas")
                export_btn = gr.Button("Export", variant="primary")
                download_output = gr.File(label="Download Result")

        formula_file.upload(
            fn=load_formula_file,
            inputs=[formula_file],
            outputs=[formulas_state, formula_preview, formula_status],
        )

        export_btn.click(
            fn=export_formulas_handler,
            inputs=[formulas_state, output_format, output_filename],
            outputs=[download_output, formula_status],
        )

    with gr.Tab("Template Library"):
        with gr.Row():
            with gr.Column(scale=1):
                gr.Markdown("### 1. Bind templates")
                template_file = gr.File(label="Template Library (JSON)", file_types=[".json"])
                template_status = gr.Textbox(label="Status", interactive=False)
                category_selector = gr.Dropdown(label="Category", choices=[], interactive=True)

            with gr.Column(scale=1):
                gr.Markdown("### 2. Templates")
                template_preview = gr.JSON(label="Templates in category")
                library_filename = gr.Textbox(label="Output Filename (optional)", placeholder="template-library")
                export_library_btn = gr.Button("Export Library", variant="primary")
                library_download = gr.File(label="Download Library")

        template_file.upload(
            fn=load_template_file,
            inputs=[template_file],
            outputs=[template_library_state, category_selector, template_status],
        )

        category_selector.change(
            fn=preview_category_handler,
            inputs=[template_library_state, category_selector],
            outputs=[template_preview],
        )

        export_library_btn.click(
            fn=export_template_library_handler,
            inputs=[template_library_state, library_filename],
            outputs=[library_download, template_status],
        )

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    demo.launch()
