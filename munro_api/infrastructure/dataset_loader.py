"""Dataset Loader — reads the Munro CSV once at startup into an immutable dataset.

Invariants:
    - Never raises to the caller: every failure becomes LoadResult.error plus a log line
    - A missing or unreadable file yields an empty dataset (fail-open startup)
    - Columns are mapped by header name, not position
    - Each accepted row passed parsing, the duplicate check and the injected verifier
    - SKIP policy drops a rejected row with a warning; ABORT discards the whole load

Design Decisions:
    - csv.DictReader with skipinitialspace: header-driven mapping with leading
      whitespace trimmed, no extra dependency for a few hundred rows
    - Row parsing delegated to the MunroCsvRow schema so coercion rules live in one place
    - Later duplicates of a running number are rejected, keeping lookup unambiguous
"""

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, TextIO

from pydantic import ValidationError

from munro_api.core.dataset import MunroDataset
from munro_api.core.domain_types import RowRejectionPolicy, RunningNumber
from munro_api.core.errors import DatasetLoadError, DatasetSourceNotFoundError
from munro_api.core.munro import Munro
from munro_api.core.verify_rows import RowVerifier, verify_munro_row
from munro_api.schemas.munro import MunroCsvRow

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS: tuple[str, ...] = ("Running No", "Name", "Height (m)", "Post 1997")


@dataclass(frozen=True)
class LoadResult:
    """Outcome of a load: always a dataset, plus the error that emptied it, if any."""
    dataset: MunroDataset
    error: DatasetLoadError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def load_munros(
    path: str | Path,
    verifier: RowVerifier = verify_munro_row,
    rejection_policy: RowRejectionPolicy = RowRejectionPolicy.SKIP,
    encoding: str = "utf-8-sig",
) -> LoadResult:
    """Load the Munro table from a CSV file."""
    source = str(path)
    if not Path(path).is_file():
        return _failed(DatasetSourceNotFoundError(source))

    try:
        with open(path, newline="", encoding=encoding) as fh:
            records, rejected = _read_rows(fh, source, verifier, rejection_policy)
    except DatasetLoadError as e:
        return _failed(e)
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        return _failed(DatasetLoadError(f"Could not read dataset: {e}", source))

    dataset = MunroDataset.from_records(records, source=source, rejected_rows=rejected)
    logger.info(
        f"Loaded {len(dataset)} Munros from {source} ({rejected} row(s) rejected)",
        extra={"record_count": len(dataset), "rejected_rows": rejected, "source": source},
    )
    return LoadResult(dataset=dataset)


def _failed(error: DatasetLoadError) -> LoadResult:
    logger.error(
        f"DatasetLoadError: {error.message}",
        extra={"error_code": error.code, "source": error.source},
    )
    return LoadResult(dataset=MunroDataset.empty(error.source), error=error)


def _read_rows(
    fh: TextIO,
    source: str,
    verifier: RowVerifier,
    policy: RowRejectionPolicy,
) -> tuple[list[Munro], int]:
    reader = csv.DictReader(fh, skipinitialspace=True)
    if reader.fieldnames is None:
        raise DatasetLoadError("Dataset has no header row", source)
    reader.fieldnames = [name.strip() for name in reader.fieldnames]
    _check_required_columns(reader.fieldnames, source)

    records: list[Munro] = []
    seen: set[RunningNumber] = set()
    rejected = 0
    # Row 1 is the header
    for row_number, raw in enumerate(reader, start=2):
        munro, reason = _parse_row(raw, seen, verifier)
        if munro is not None:
            seen.add(munro.running_number)
            records.append(munro)
            continue
        rejected += 1
        if policy is RowRejectionPolicy.ABORT:
            raise DatasetLoadError(f"Row {row_number} rejected: {reason}", source)
        logger.warning(
            f"Skipping row {row_number}: {reason}",
            extra={"row_number": row_number, "source": source},
        )
    return records, rejected


def _check_required_columns(fieldnames: Iterable[str], source: str) -> None:
    present = set(fieldnames)
    missing = [c for c in REQUIRED_COLUMNS if c not in present]
    if missing:
        raise DatasetLoadError(
            f"Dataset is missing required column(s): {', '.join(missing)}", source,
        )


def _parse_row(
    raw: dict, seen: set[RunningNumber], verifier: RowVerifier,
) -> tuple[Munro | None, str | None]:
    """Parse and verify one row. Returns (munro, None) or (None, reason)."""
    # DictReader puts surplus cells under the None key
    cells = {k: v for k, v in raw.items() if k is not None}
    try:
        munro = MunroCsvRow.model_validate(cells).to_munro()
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors())
        return None, f"malformed row, invalid {fields}"

    if munro.running_number in seen:
        return None, f"duplicate running number {munro.running_number}"

    verdict = verifier(munro)
    if not verdict.accepted:
        return None, verdict.reason or "rejected by verifier"
    return munro, None
