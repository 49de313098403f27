from typing import IO, Optional, Tuple, Union

import chardet

ENCODE_REC_THRESHOLD = 0.8

# -- encodings tried in order when detection is not confident, most likely for saved web pages --
COMMON_ENCODINGS = [
    "utf_8",
    "utf_8_sig",
    "cp1252",
    "iso_8859_1",
    "utf_16",
]


def format_encoding_str(encoding: str) -> str:
    """Format input encoding string (e.g., `utf-8`, `iso-8859-1`, etc).

    Parameters
    ----------
    encoding
        The encoding string to be formatted (e.g., `UTF-8`, `utf_8`, `ISO-8859-1`, `iso_8859_1`,
        etc).
    """
    return encoding.lower().replace("_", "-")


def detect_file_encoding(
    filename: str = "",
    file: Optional[Union[bytes, IO[bytes]]] = None,
) -> Tuple[str, str]:
    """Detect the encoding of a saved chapter page and decode it.

    Returns the formatted encoding name and the decoded text.
    """
    if filename:
        with open(filename, "rb") as f:
            byte_data = f.read()
    elif file:
        byte_data = file if isinstance(file, bytes) else file.read()
    else:
        raise FileNotFoundError("No filename nor file were specified")

    result = chardet.detect(byte_data)
    encoding = result["encoding"]
    confidence = result["confidence"]

    if encoding is None or confidence < ENCODE_REC_THRESHOLD:
        # Encoding detection failed, fallback to predefined encodings
        for enc in COMMON_ENCODINGS:
            try:
                file_text = byte_data.decode(enc)
                encoding = enc
                break
            except (UnicodeDecodeError, UnicodeError):
                continue
        else:
            raise UnicodeDecodeError(
                "Unable to determine the encoding of the file or match it with any "
                "of the specified encodings.",
                byte_data,
                0,
                len(byte_data),
                "Invalid encoding",
            )
    else:
        file_text = byte_data.decode(encoding)

    return format_encoding_str(encoding), file_text


def read_txt_file(
    filename: str = "",
    file: Optional[Union[bytes, IO[bytes]]] = None,
    encoding: Optional[str] = None,
) -> Tuple[str, str]:
    """Read a saved chapter page, decoding with `encoding` when given or a detected one."""
    if not filename and not file:
        raise FileNotFoundError("No filename was specified")

    if not encoding:
        return detect_file_encoding(filename, file)

    formatted_encoding = format_encoding_str(encoding)
    if filename:
        with open(filename, encoding=formatted_encoding) as f:
            return formatted_encoding, f.read()

    file_content = file if isinstance(file, bytes) else file.read()  # type: ignore[union-attr]
    if isinstance(file_content, bytes):
        return formatted_encoding, file_content.decode(formatted_encoding)
    return formatted_encoding, file_content
