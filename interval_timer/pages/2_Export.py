from __future__ import annotations

import streamlit as st

from interval_timer.services.export import to_csv, to_markdown

st.set_page_config(page_title="Export Program", page_icon="📤")

st.title("Export")

program = st.session_state.get("program")
if program is None or not program.items:
    st.info("No program in session. Build one on the main page first.")
else:
    slug = (program.name or "program").strip().lower().replace(" ", "_")
    csv_bytes = to_csv(program)
    md_text = to_markdown(program)
    st.download_button("Download CSV", data=csv_bytes, file_name=f"{slug}.csv", mime="text/csv")
    st.download_button("Download Markdown", data=md_text, file_name=f"{slug}.md", mime="text/markdown")
    st.markdown(md_text)
