"""Streamlit app for picking random files out of a pasted storage listing.

Run locally with:
    streamlit run apps/streamlit_picker.py

Upload or paste the lines copied from a ``megacmd`` session, then pick single
files or draw a batch. The current batch can be downloaded as a text listing
or a CSV table. All state lives in ``st.session_state`` and is dropped when
the browser session ends.
"""
from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import streamlit as st


def _ensure_project_on_path():
    """Put the repository root on sys.path.

    Streamlit executes the script with its own working directory, so the
    parent of apps/ is added explicitly when it contains the package.
    """
    root = Path(__file__).resolve().parents[1]
    if (root / "megapick").is_dir() and str(root) not in sys.path:
        sys.path.insert(0, str(root))


_ensure_project_on_path()

from config.logging_config import configure_logging
from config.settings import settings
from megapick.export.links import build_link
from megapick.export.report import batch_to_frame, export_filename, format_batch_text
from megapick.parsing.categories import category_icon
from megapick.session import EMPTY_LISTING_MESSAGE, PickerSession

SESSION_KEY = "picker"


def get_session() -> PickerSession:
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = PickerSession()
    return st.session_state[SESSION_KEY]


def _load(session: PickerSession, data: bytes) -> None:
    if len(data) > settings.MAX_UPLOAD_BYTES:
        st.error(f"Listing is larger than {settings.MAX_UPLOAD_BYTES} bytes; split it and try again.")
        return
    records = session.load_bytes(data)
    if not records:
        st.warning(EMPTY_LISTING_MESSAGE)


def render_loader(session: PickerSession) -> None:
    st.markdown("Upload a `.txt` file or paste the lines containing file paths and handles "
                "(e.g. `/path/to/file.jpg <H:handle>`).")
    st.caption("Create the .txt file by copy-pasting the output of the `find` command.")

    uploaded = st.file_uploader("Listing file", type=["txt", "log"])
    if uploaded is not None and st.button("Load file"):
        try:
            data = uploaded.getvalue()
        except OSError as exc:
            st.error(f"Error reading file: {exc}")
            return
        _load(session, data)
        if session.is_loaded:
            st.rerun()

    pasted = st.text_area("...or paste the listing here", height=200)
    if st.button("Load pasted text", disabled=not pasted.strip()):
        _load(session, pasted.encode("utf-8"))
        if session.is_loaded:
            st.rerun()


def render_current(session: PickerSession) -> None:
    rec = session.current
    if rec is None:
        return
    st.subheader(f"{category_icon(rec.category)} {rec.file_name}")
    st.text(f"Folder: {rec.folder_path}")
    st.text(f"Path:   {rec.full_path}")
    link = build_link(rec.handle)
    if link:
        st.link_button("Open link", link)


def render_batch(session: PickerSession) -> None:
    if not session.batch:
        return
    st.markdown(f"### Current batch ({len(session.batch)})")
    for rec in session.batch:
        marker = "▶ " if session.current is not None and session.current.id == rec.id else ""
        st.button(
            f"{marker}{category_icon(rec.category)} {rec.file_name}  ·  {rec.folder_path}",
            key=f"batch_{rec.id}",
            on_click=session.select,
            args=(rec.id,),
        )

    today = date.today()
    col_txt, col_csv = st.columns(2)
    col_txt.download_button(
        "Download list (.txt)",
        data=format_batch_text(session.batch, today.isoformat()),
        file_name=export_filename(today, "txt"),
        mime="text/plain",
    )
    col_csv.download_button(
        "Download table (.csv)",
        data=batch_to_frame(session.batch).to_csv(index=False),
        file_name=export_filename(today, "csv"),
        mime="text/csv",
    )
    with st.expander("Batch as text"):
        st.code(format_batch_text(session.batch), language=None)


def render_picker(session: PickerSession) -> None:
    stats = session.stats
    c1, c2 = st.columns(2)
    c1.metric("Files", stats["files"])
    c2.metric("Folders", stats["folders"])

    count = st.number_input("Batch size", min_value=1, value=settings.DEFAULT_BATCH_SIZE, step=1)
    b1, b2, b3 = st.columns(3)
    b1.button("Pick random file", on_click=session.pick_one)
    b2.button(f"Generate {int(count)} files", on_click=session.generate_batch, args=(int(count),))
    if session.batch:
        b3.button("Clear batch", on_click=session.clear_batch)

    render_current(session)
    render_batch(session)

    st.divider()
    st.button("Load different file", on_click=session.reset)


def main():
    configure_logging()
    st.set_page_config(page_title="Random File Picker")
    st.title("Random File Picker")

    session = get_session()
    if session.is_loaded:
        render_picker(session)
    else:
        render_loader(session)


if __name__ == "__main__":
    main()
