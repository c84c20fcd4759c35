"""Load the main document part of a .docx archive as an lxml tree."""

import logging
import os
import zipfile
import zlib

from lxml import etree

from docxscan.config import settings
from docxscan.exceptions import (
    ArchiveError,
    MalformedXmlError,
    MissingPartError,
    PartTooLargeError,
)

logger = logging.getLogger(__name__)

# No entity expansion, no DTD or network access
SECURE_PARSER = etree.XMLParser(
    resolve_entities=False,
    no_network=True,
    load_dtd=False,
    huge_tree=False,
    remove_blank_text=False,
)

DocumentTree = etree._Element


def strip_namespaces(root: DocumentTree) -> DocumentTree:
    """
    Remove namespaces from every element tag and attribute name in place.

    After stripping, elements can be selected by their local name
    (``tbl`` instead of ``{http://...}tbl``).

    Args:
        root: Parsed document root

    Returns:
        The same root, for chaining
    """
    for element in root.iter():
        # Comments and processing instructions have non-string tags
        if not isinstance(element.tag, str):
            continue
        element.tag = etree.QName(element).localname
        for name in [n for n in element.attrib if n.startswith("{")]:
            value = element.attrib.pop(name)
            element.attrib[etree.QName(name).localname] = value

    etree.cleanup_namespaces(root)
    return root


class DocumentLoader:
    """Open a .docx archive and parse its main document part."""

    def __init__(self, part_name: str | None = None, max_part_size: int | None = None):
        self.part_name = part_name or settings.document_part
        self.max_part_size = max_part_size or settings.max_part_size_bytes

    def load(self, path: str | os.PathLike) -> DocumentTree:
        """
        Load a .docx file and return its namespace-stripped document tree.

        Args:
            path: Path to the .docx file

        Returns:
            Root element of word/document.xml with namespaces removed

        Raises:
            ArchiveError: The file is missing, unreadable or not a zip archive
            MissingPartError: The archive has no document part
            MalformedXmlError: The document part is not well-formed XML
        """
        content = self.read_part(path)
        root = self.parse(content, path)
        return strip_namespaces(root)

    def read_part(self, path: str | os.PathLike) -> bytes:
        """Read the raw bytes of the document part from the archive."""
        logger.debug(f"Opening archive {path}")
        try:
            with zipfile.ZipFile(path) as archive:
                info = self._find_part(archive, path)
                if info.file_size > self.max_part_size:
                    raise PartTooLargeError(
                        f"{self.part_name} in {path} is {info.file_size} bytes, "
                        f"limit is {self.max_part_size}",
                        path=path,
                        size=info.file_size,
                        limit=self.max_part_size,
                    )
                return archive.read(info)
        except (zipfile.BadZipFile, zlib.error, EOFError) as e:
            logger.debug(f"Invalid archive {path}: {e}")
            raise ArchiveError(f"Not a valid .docx archive: {path} ({e})", path=path) from e
        # Unsupported compression method, or an encrypted entry
        except (NotImplementedError, RuntimeError) as e:
            logger.debug(f"Unreadable {self.part_name} in {path}: {e}")
            raise ArchiveError(
                f"Cannot read {self.part_name} in {path}: {e}", path=path
            ) from e
        except OSError as e:
            logger.debug(f"Cannot open {path}: {e}")
            raise ArchiveError(f"Cannot open {path}: {e}", path=path) from e

    def parse(self, content: bytes, path: str | os.PathLike | None = None) -> DocumentTree:
        """Parse document part bytes with the hardened parser."""
        try:
            root = etree.fromstring(content, SECURE_PARSER)
        except etree.XMLSyntaxError as e:
            logger.debug(f"Malformed {self.part_name} in {path}: {e}")
            raise MalformedXmlError(
                f"Malformed XML in {self.part_name} of {path}: {e}",
                path=path,
                part=self.part_name,
            ) from e

        logger.debug(f"Parsed {self.part_name} from {path}")
        return root

    def _find_part(self, archive: zipfile.ZipFile, path) -> zipfile.ZipInfo:
        """Find the document part entry, ignoring directory entries."""
        for info in archive.infolist():
            if info.filename == self.part_name and not info.is_dir():
                return info

        raise MissingPartError(
            f"{path} has no {self.part_name} entry",
            path=path,
            part=self.part_name,
        )
