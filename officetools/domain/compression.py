from __future__ import annotations

import zipfile
from dataclasses import dataclass
from io import BytesIO
from typing import Callable, Iterable, Optional

from officetools.domain.errors import ToolInputError

COMPRESSION_LEVELS = {
    0: 'No Compression (Fastest)',
    1: 'Minimal Compression',
    3: 'Low Compression',
    6: 'Standard Compression',
    9: 'Maximum Compression (Slowest)',
}
DEFAULT_LEVEL = 6

SIZE_UNITS = ('Bytes', 'KB', 'MB', 'GB')


@dataclass(frozen=True)
class InputFile:
    name: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class CompressionResult:
    archive: bytes
    file_count: int
    original_size: int

    @property
    def compressed_size(self) -> int:
        return len(self.archive)

    @property
    def ratio(self) -> float:
        """Saved fraction of the input size (0.0 when nothing was saved)."""
        if not self.original_size:
            return 0.0
        return max(0.0, 1 - self.compressed_size / self.original_size)


def format_file_size(num_bytes: int) -> str:
    if num_bytes <= 0:
        return '0 Bytes'
    index = 0
    while num_bytes >= 1024 ** (index + 1) and index < len(SIZE_UNITS) - 1:
        index += 1
    value = round(num_bytes / (1024 ** index), 2)
    return f'{value:g} {SIZE_UNITS[index]}'


def _unique_name(name: str, taken: set[str]) -> str:
    if name not in taken:
        return name
    stem, dot, ext = name.rpartition('.')
    if not dot:
        stem, ext = name, ''
    counter = 1
    while True:
        candidate = f'{stem} ({counter}){dot}{ext}'
        if candidate not in taken:
            return candidate
        counter += 1


def compress_files(
    files: Iterable[InputFile],
    level: int = DEFAULT_LEVEL,
    on_progress: Optional[Callable[[int], None]] = None,
) -> CompressionResult:
    """Pack ``files`` into one ZIP archive at the given deflate level.

    Level 0 stores members uncompressed. ``on_progress`` receives integer
    percentages from 0 to 100 as members are written.
    """
    files = list(files)
    if not files:
        raise ToolInputError('Please select at least one file to compress')
    if level not in COMPRESSION_LEVELS:
        raise ToolInputError(f'Unsupported compression level: {level}')

    method = zipfile.ZIP_STORED if level == 0 else zipfile.ZIP_DEFLATED
    report = on_progress or (lambda _pct: None)
    report(0)

    buffer = BytesIO()
    taken: set[str] = set()
    total = sum(f.size for f in files) or 1
    written = 0

    with zipfile.ZipFile(buffer, 'w', compression=method, compresslevel=None if level == 0 else level) as archive:
        for index, item in enumerate(files, start=1):
            name = _unique_name(item.name or f'file-{index}', taken)
            taken.add(name)
            archive.writestr(name, item.data)
            written += item.size
            report(min(100, int(written * 100 / total)) if index < len(files) else 100)

    return CompressionResult(
        archive=buffer.getvalue(),
        file_count=len(files),
        original_size=sum(f.size for f in files),
    )
