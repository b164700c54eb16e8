import pytest

from megapick.parsing.line_parser import (
    build_record,
    extension_of,
    parse_line,
    parse_listing,
    split_handle_token,
)


SAMPLE = """mega> ls -la
/docs/report.pdf <H:HANDLE1>
/docs/report.pdf <H:HANDLE1>
/pics/img.PNG <H:HANDLE2>
"""


def test_terminal_paste_scenario():
    records = parse_listing(SAMPLE)
    assert len(records) == 3
    third = records[2]
    assert third.extension == "png"
    assert third.category == "image"
    assert third.folder_path == "/pics"
    assert third.handle == "HANDLE2"
    # duplicates are parsed independently
    assert records[0].full_path == records[1].full_path == "/docs/report.pdf"
    assert records[0].id != records[1].id


def test_example_line_fields():
    rec = parse_line("/videos/trip/clip1.mp4   <H:AbCd1234XyZ>", 0)
    assert rec is not None
    assert rec.to_dict() == {
        "id": 0,
        "file_name": "clip1.mp4",
        "full_path": "/videos/trip/clip1.mp4",
        "folder_path": "/videos/trip",
        "extension": "mp4",
        "category": "video",
        "handle": "AbCd1234XyZ",
    }


def test_lines_without_marker_are_dropped():
    text = "\n".join([
        "Welcome to MEGAcmd!",
        "",
        "/a/b.txt",
        "/a/c.txt <X:nope>",
        "/a/d.txt <H:ok>",
    ])
    records = parse_listing(text)
    assert [r.file_name for r in records] == ["d.txt"]
    marker_lines = sum(1 for line in text.split("\n") if "<H:" in line)
    assert len(records) <= marker_lines


def test_ids_are_dense_output_positions():
    text = "junk <H:\n/a.jpg <H:1>\nnoise\n/b.jpg <H:2>\n/// <H:3>\n/c.jpg <H:4>\n"
    records = parse_listing(text)
    assert [r.id for r in records] == list(range(len(records)))
    assert [r.handle for r in records] == ["1", "2", "4"]


def test_path_of_only_slashes_is_skipped():
    assert parse_line("/// <H:abc>", 0) is None
    assert parse_listing("/ <H:abc>") == []


def test_top_level_file_has_root_folder():
    rec = parse_line("/notes.txt <H:h>", 0)
    assert rec.folder_path == "/"
    assert rec.full_path == "/notes.txt"
    assert rec.category == "document"


@pytest.mark.parametrize(
    "line",
    [
        "/videos/trip/clip1.mp4 <H:a>",
        "photos//2020///beach.jpg <H:b>",
        "/top.bin <H:c>",
        "deep/er/path/x <H:d>",
    ],
)
def test_folder_and_name_rebuild_full_path(line):
    rec = parse_line(line, 0)
    folder = "" if rec.folder_path == "/" else rec.folder_path
    assert folder + "/" + rec.file_name == rec.full_path


def test_slashes_are_normalized():
    rec = parse_line("photos//2020///beach.jpg <H:b>", 0)
    assert rec.full_path == "/photos/2020/beach.jpg"
    assert rec.folder_path == "/photos/2020"


def test_handle_requires_whitespace_before_marker():
    assert split_handle_token("/a/b.jpg<H:abc>") is None


def test_line_must_end_with_handle_token():
    assert split_handle_token("/a/b.jpg <H:abc> trailing") is None
    assert split_handle_token("/a/b.jpg <H:abc") is None


def test_empty_handle_is_rejected():
    assert split_handle_token("/a/b.jpg <H:>") is None


def test_last_handle_token_wins():
    path, handle = split_handle_token("/a/b.jpg <H:first> <H:second>")
    assert handle == "second"
    assert path == "/a/b.jpg <H:first>"


def test_path_is_shortest_prefix():
    # a marker inside the handle text does not extend the path
    path, handle = split_handle_token("/a/b.jpg <H:x <H:y>")
    assert path == "/a/b.jpg"
    assert handle == "x <H:y"


def test_surrounding_whitespace_and_crlf():
    text = "   /music/song.MP3    <H:  zz9  >   \r\n"
    records = parse_listing(text)
    assert len(records) == 1
    assert records[0].handle == "zz9"
    assert records[0].extension == "mp3"
    assert records[0].category == "audio"


def test_paths_with_spaces():
    rec = parse_line("/My Videos/summer trip.mov  <H:q1>", 0)
    assert rec.file_name == "summer trip.mov"
    assert rec.folder_path == "/My Videos"


@pytest.mark.parametrize(
    "name,expected",
    [("a.JPG", "jpg"), ("archive.tar.gz", "gz"), ("README", ""), ("trailing.", ""), (".bashrc", "bashrc")],
)
def test_extension_of(name, expected):
    assert extension_of(name) == expected


def test_build_record_without_extension_falls_back_to_file():
    rec = build_record(5, "/bin/tool", "h")
    assert rec.id == 5
    assert rec.extension == ""
    assert rec.category == "file"


def test_empty_and_noise_inputs():
    assert parse_listing("") == []
    assert parse_listing("mega> help\nnothing here\n") == []


def test_records_are_immutable():
    rec = parse_line("/a.png <H:h>", 0)
    with pytest.raises(AttributeError):
        rec.handle = "other"
