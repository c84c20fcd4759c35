"""Helpers for writing minimal .docx archives in tests."""

import zipfile

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="xml" ContentType="application/xml"/>'
    "</Types>"
)


def document_xml(body: str) -> str:
    """Wrap a body snippet (using the w: prefix) in a full document part."""
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:document xmlns:w="{W_NS}"><w:body>{body}</w:body></w:document>'
    )


def paragraph(*runs: str) -> str:
    """Build a w:p with one w:r/w:t per run."""
    inner = "".join(f'<w:r><w:t xml:space="preserve">{run}</w:t></w:r>' for run in runs)
    return f"<w:p>{inner}</w:p>"


def cell(*runs: str) -> str:
    return f"<w:tc>{paragraph(*runs)}</w:tc>"


def table(rows: list[list[str]]) -> str:
    """Build a w:tbl where each cell holds a single paragraph."""
    xml_rows = "".join("<w:tr>" + "".join(cell(c) for c in row) + "</w:tr>" for row in rows)
    return f"<w:tbl>{xml_rows}</w:tbl>"


def write_docx(
    path,
    body: str | None = None,
    raw_document: str | bytes | None = None,
    compression: int = zipfile.ZIP_DEFLATED,
) -> str:
    """Write a minimal .docx archive and return its path.

    With neither body nor raw_document, the archive has no document part.
    """
    with zipfile.ZipFile(path, "w", compression=compression) as archive:
        archive.writestr("[Content_Types].xml", CONTENT_TYPES)
        if raw_document is not None:
            archive.writestr("word/document.xml", raw_document)
        elif body is not None:
            archive.writestr("word/document.xml", document_xml(body))
    return str(path)


# Offsets of fields inside zip headers
LOCAL_HEADER_SIZE = 30
LOCAL_FLAGS = 6
LOCAL_METHOD = 8
CENTRAL_SIGNATURE = b"PK\x01\x02"
CENTRAL_FLAGS = 8
CENTRAL_METHOD = 10


def patch_entry_field(path, name: str, local_field: int, central_field: int, value: int) -> None:
    """Overwrite a 2-byte field in both the local and central header of one entry."""
    with zipfile.ZipFile(path) as archive:
        local = archive.getinfo(name).header_offset

    with open(path, "rb") as f:
        data = bytearray(f.read())

    packed = value.to_bytes(2, "little")
    data[local + local_field : local + local_field + 2] = packed

    index = data.find(CENTRAL_SIGNATURE)
    while index != -1:
        name_len = int.from_bytes(data[index + 28 : index + 30], "little")
        if bytes(data[index + 46 : index + 46 + name_len]) == name.encode():
            data[index + central_field : index + central_field + 2] = packed
            break
        index = data.find(CENTRAL_SIGNATURE, index + 1)

    with open(path, "wb") as f:
        f.write(data)


def corrupt_entry_data(path, name: str, value: int = 0xFF) -> None:
    """Replace the first byte of an entry's stored or compressed data."""
    with zipfile.ZipFile(path) as archive:
        local = archive.getinfo(name).header_offset

    with open(path, "rb") as f:
        data = bytearray(f.read())

    name_len = int.from_bytes(data[local + 26 : local + 28], "little")
    extra_len = int.from_bytes(data[local + 28 : local + 30], "little")
    start = local + LOCAL_HEADER_SIZE + name_len + extra_len
    data[start] = value if data[start] != value else value ^ 0x01

    with open(path, "wb") as f:
        f.write(data)
