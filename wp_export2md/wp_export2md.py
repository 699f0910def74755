"""
End-to-end conversion of a WordPress WXR export to a Markdown document.

``convert_export`` is the pure pipeline (text in, ``ConversionResult`` out).
``ConversionSession`` keeps the "current" file and output for an interactive
front end, and ``convert_wxr2md`` is the file-to-file operation used by the
command line.
"""

import codecs
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

import yaml
from slugify import slugify

from .errors import ConversionError, InvalidInputKind, ReadFailure
from .markdown_writer import generate_markdown
from .models import ExportStats, ParsedExport
from .wxr_parser import parse_wordpress_xml

DEFAULT_DOWNLOAD_NAME = "wordpress-export"
MARKDOWN_SUFFIX = ".md"

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ConversionResult:
    export: ParsedExport
    markdown: str

    @property
    def stats(self) -> ExportStats:
        return self.export.stats


# Custom representer for multiline strings as block scalars
def str_presenter(dumper, data):
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


class ExportDumper(yaml.SafeDumper):
    pass


ExportDumper.add_representer(str, str_presenter)


def check_input_kind(xml_filepath: PathLike) -> Path:
    """Rejects anything that is not named like an XML file."""
    path = Path(xml_filepath)
    if path.suffix.lower() != ".xml":
        raise InvalidInputKind()
    return path


def read_export_file(xml_filepath: PathLike) -> str:
    """
    Reads an export file as UTF-8 text.

    Args:
        xml_filepath: Path to the WordPress XML export file

    Returns:
        The file content, without any byte order mark

    Raises:
        InvalidInputKind: If the file is not an .xml file or is not UTF-8
        ReadFailure: If the file cannot be read
    """
    path = check_input_kind(xml_filepath)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise ReadFailure() from e

    if raw.startswith(codecs.BOM_UTF8):
        raw = raw[len(codecs.BOM_UTF8):]
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidInputKind() from e


def convert_export(
    xml_content: Union[str, bytes], generated_on: Optional[date] = None
) -> ConversionResult:
    """Parses an export document and renders it as Markdown."""
    export = parse_wordpress_xml(xml_content)
    return ConversionResult(
        export=export, markdown=generate_markdown(export, generated_on=generated_on)
    )


def download_filename(
    export: Optional[ParsedExport], source_name: Optional[PathLike] = None
) -> str:
    """
    Derives the Markdown file name for an export.

    The slugified site title is used when there is one, then the stem of the
    source file, then ``wordpress-export``.
    """
    name = ""
    if export is not None and export.site_info.title:
        name = slugify(export.site_info.title)
    if not name and source_name:
        name = Path(source_name).stem
    return (name or DEFAULT_DOWNLOAD_NAME) + MARKDOWN_SUFFIX


def dump_export_yaml(export: ParsedExport, stream: TextIO) -> None:
    """Writes the extracted records and their counts as YAML."""
    yaml.dump(
        export.as_dict(),
        stream,
        Dumper=ExportDumper,
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False,
    )


class ConversionSession:
    """
    Holds the file being worked on and the last successful conversion.

    A new ``process_file`` call supersedes the previous one. The parsed data
    and Markdown are replaced only when a conversion succeeds, so a failed
    run leaves the earlier output available.
    """

    def __init__(
        self,
        on_success: Optional[Callable[[ConversionResult], None]] = None,
        on_error: Optional[Callable[[ConversionError], None]] = None,
    ) -> None:
        self.on_success = on_success
        self.on_error = on_error
        self.reset()

    def reset(self) -> None:
        self.current_file: Optional[Path] = None
        self.parsed_data: Optional[ParsedExport] = None
        self.markdown_content = ""
        self.last_error: Optional[ConversionError] = None

    @property
    def stats(self) -> Optional[ExportStats]:
        if self.parsed_data is None:
            return None
        return self.parsed_data.stats

    def _fail(self, error: ConversionError) -> None:
        self.last_error = error
        if self.on_error is not None:
            self.on_error(error)

    def process_file(self, xml_filepath: PathLike) -> ConversionResult:
        try:
            path = check_input_kind(xml_filepath)
        except InvalidInputKind as e:
            self._fail(e)
            raise

        self.current_file = path
        try:
            result = convert_export(read_export_file(path))
        except ConversionError as e:
            self._fail(e)
            raise

        self.parsed_data = result.export
        self.markdown_content = result.markdown
        self.last_error = None
        if self.on_success is not None:
            self.on_success(result)
        return result

    def retry(self) -> ConversionResult:
        if self.current_file is None:
            raise InvalidInputKind()
        return self.process_file(self.current_file)

    def download_filename(self) -> str:
        return download_filename(self.parsed_data, self.current_file)


def convert_wxr2md(
    xml_filepath: PathLike,
    md_filepath: Optional[PathLike] = None,
    yaml_filepath: Optional[PathLike] = None,
    verbose: bool = True,
) -> ConversionResult:
    """
    Convert a WordPress WXR export file to a Markdown document.

    Args:
        xml_filepath: Path to the WordPress XML export file
        md_filepath: Where to write the Markdown; defaults to the derived
            download name next to the export file
        yaml_filepath: Optional path for a YAML dump of the extracted records
        verbose: Print progress messages

    Returns:
        The conversion result

    Raises:
        ConversionError: If the export cannot be read or parsed
        OSError: If an output file cannot be written
    """

    def report(message):
        if verbose:
            print(message)

    report(f"Lettura di {xml_filepath}...")
    result = convert_export(read_export_file(xml_filepath))
    stats = result.stats
    report(
        f"Conversione completata: {stats.posts} articoli, {stats.pages} pagine, "
        f"{stats.categories} categorie, {stats.tags} tag."
    )

    if md_filepath is None:
        md_filepath = Path(xml_filepath).with_name(
            download_filename(result.export, xml_filepath)
        )
    report(f"Scrittura del documento Markdown in {md_filepath}...")
    with open(md_filepath, "w", encoding="utf-8") as outfile:
        outfile.write(result.markdown)
    report(f"File Markdown salvato in {md_filepath}.")

    if yaml_filepath is not None:
        report(f"Scrittura dei dati in {yaml_filepath}...")
        with open(yaml_filepath, "w", encoding="utf-8") as outfile:
            dump_export_yaml(result.export, outfile)
        report(f"File YAML salvato in {yaml_filepath}.")

    return result
