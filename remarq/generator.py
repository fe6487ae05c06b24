from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .converter import DocConverter
from .errors import InvalidArgument, InvalidTemplate, IOFailure
from .render import MARKUP_SUFFIX, PAGE_SUFFIX, copy_file, read_template, write_text
from .utils import clean_output_dir, is_within, list_files

MARKUP = "markup"
OTHER = "other"

PathLike = Union[str, Path]


@dataclass(frozen=True)
class FileEntry:
    source: Path
    relative: Path
    kind: str

    @property
    def is_markup(self) -> bool:
        return self.kind == MARKUP

    def destination(self, root: Path) -> Path:
        dest = root / self.relative
        if self.is_markup:
            dest = dest.with_name(dest.name[: -len(MARKUP_SUFFIX)] + PAGE_SUFFIX)
        return dest


def classify(path: Path) -> str:
    return MARKUP if path.suffix == MARKUP_SUFFIX else OTHER


class Generator:
    def __init__(self, source_dir: PathLike, dest_dir: PathLike, template_path: PathLike):
        source = Path(source_dir)
        dest = Path(dest_dir)
        template_file = Path(template_path)
        if not source.is_dir():
            raise InvalidArgument(f"Source path {source} does not exist")
        if not template_file.is_file():
            raise InvalidArgument(f"Template file {template_file} does not exist")
        if is_within(source, dest):
            raise InvalidArgument(f"Destination {dest} would overwrite source {source}")
        if is_within(dest, source):
            raise InvalidArgument(f"Destination {dest} may not be inside source {source}")
        try:
            template = read_template(template_file)
        except (OSError, UnicodeDecodeError) as exc:
            raise InvalidArgument(f"Template file {template_file} could not be read: {exc}") from exc
        if not template.strip():
            raise InvalidTemplate("HTML template is empty")
        self.source_dir = source.resolve()
        self.dest_dir = dest
        self.converter = DocConverter(template)

    def discover(self) -> list[FileEntry]:
        return [
            FileEntry(source=path, relative=path.relative_to(self.source_dir), kind=classify(path))
            for path in list_files(self.source_dir)
        ]

    def generate(self) -> int:
        entries = self.discover()
        try:
            clean_output_dir(self.dest_dir)
        except OSError as exc:
            raise IOFailure(self.dest_dir, exc) from exc
        if not entries:
            return 0

        with ThreadPoolExecutor() as executor:
            futures = [executor.submit(self.process, entry) for entry in entries]
        for future in futures:
            future.result()
        return len(entries)

    def process(self, entry: FileEntry) -> None:
        dest = entry.destination(self.dest_dir)
        try:
            if entry.is_markup:
                self.convert_file(entry.source, dest)
            else:
                copy_file(entry.source, dest)
        except (OSError, UnicodeDecodeError) as exc:
            raise IOFailure(entry.relative.as_posix(), exc) from exc

    def convert_file(self, source: Path, dest: Path) -> None:
        raw_text = source.read_text(encoding="utf-8-sig")
        write_text(dest, self.converter.convert(raw_text, source.name))
