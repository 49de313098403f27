import io
from unittest.mock import patch

import pytest

from biblemark.file_utils.encoding import (
    detect_file_encoding,
    format_encoding_str,
    read_txt_file,
)
from test_biblemark.unit_utils import example_doc_path

PAGE = (
    "<html><body><p><span class='text Ps-23-1'>Yahweh is my shepherd; I’ll lack nothing.</span>"
    "</p></body></html>"
)


@pytest.mark.parametrize(
    ("encoding", "expected_value"),
    [("UTF-8", "utf-8"), ("utf_8", "utf-8"), ("ISO_8859_1", "iso-8859-1"), ("cp1252", "cp1252")],
)
def test_format_encoding_str(encoding, expected_value):
    assert format_encoding_str(encoding) == expected_value


def test_detect_file_encoding_of_a_saved_page():
    encoding, text = detect_file_encoding(filename=example_doc_path("psalm-23-web.html"))

    assert encoding == "utf-8"
    assert "Yahweh is my shepherd;" in text


def test_detect_file_encoding_falls_back_to_common_encodings_when_detection_is_unsure():
    detect_result = {"encoding": None, "confidence": 0.0}
    with patch("biblemark.file_utils.encoding.chardet.detect", return_value=detect_result):
        encoding, text = detect_file_encoding(file=PAGE.encode("cp1252"))

    assert encoding == "cp1252"
    assert text == PAGE


def test_detect_file_encoding_raises_when_no_encoding_fits():
    detect_result = {"encoding": None, "confidence": 0.0}
    with patch("biblemark.file_utils.encoding.chardet.detect", return_value=detect_result):
        with patch("biblemark.file_utils.encoding.COMMON_ENCODINGS", ["ascii"]):
            with pytest.raises(UnicodeDecodeError):
                detect_file_encoding(file=PAGE.encode("utf-8"))


def test_detect_file_encoding_raises_without_a_source():
    with pytest.raises(FileNotFoundError):
        detect_file_encoding()


def test_read_txt_file_uses_an_explicit_encoding_for_a_file():
    encoding, text = read_txt_file(file=io.BytesIO(PAGE.encode("utf-16")), encoding="UTF_16")

    assert encoding == "utf-16"
    assert text == PAGE


def test_read_txt_file_uses_an_explicit_encoding_for_a_filename(tmp_path):
    filename = str(tmp_path / "page.html")
    with open(filename, "w", encoding="cp1252") as f:
        f.write(PAGE)

    assert read_txt_file(filename=filename, encoding="cp1252") == ("cp1252", PAGE)


def test_read_txt_file_raises_without_a_source():
    with pytest.raises(FileNotFoundError):
        read_txt_file(encoding="utf-8")
