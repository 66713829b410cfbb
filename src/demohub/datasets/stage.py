"""
Staged file access.

Client-side counterpart of an external stage plus ``COPY INTO``: files are
listed and fetched from the public S3 bucket, read with pandas, and their
columns matched onto a declared table by case-insensitive name.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import pandas as pd
from sqlalchemy.sql.schema import Table

from ..config import config
from ..utils.aws_helpers import download_object, list_s3_keys
from ..utils.logger import get_logger

logger = get_logger(__name__)

STAGED_FILE_SUFFIXES = (".csv",)


def _stage_key(prefix: str) -> str:
    base = config.stage.prefix
    if base and not base.endswith("/"):
        base += "/"
    return f"{base}{prefix}"


def list_staged_files(prefix: str, bucket: Optional[str] = None) -> List[str]:
    """
    List staged data files under a stage path.

    Args:
        prefix: Path relative to the stage root (e.g. 'iot/sensor_data/')
        bucket: Bucket name. If None, uses config.

    Returns:
        Object keys of the staged files.
    """
    bucket = bucket or config.stage.bucket
    return list_s3_keys(bucket, _stage_key(prefix), suffixes=STAGED_FILE_SUFFIXES)


def fetch_staged_files(
    prefix: str,
    dest_dir: Optional[Union[str, Path]] = None,
    bucket: Optional[str] = None,
    force: bool = False
) -> List[Path]:
    """
    Download staged files to a local directory.

    Args:
        prefix: Path relative to the stage root
        dest_dir: Local directory. If None, uses the configured cache dir.
        bucket: Bucket name. If None, uses config.
        force: Download even if the file is already cached

    Returns:
        Local paths of the downloaded files.

    Raises:
        FileNotFoundError: If nothing is staged under the prefix
        IOError: If a download fails
    """
    bucket = bucket or config.stage.bucket
    dest = Path(dest_dir or config.stage.cache_dir) / prefix

    keys = list_staged_files(prefix, bucket=bucket)
    if not keys:
        raise FileNotFoundError(f"No staged files under s3://{bucket}/{_stage_key(prefix)}")

    paths = []
    for key in keys:
        path = dest / Path(key).name
        if path.exists() and not force:
            logger.info(f"Using cached file: {path}")
        elif not download_object(bucket, key, path):
            raise IOError(f"Failed to download s3://{bucket}/{key}")
        paths.append(path)
    return paths


def local_staged_files(stage_dir: Union[str, Path], prefix: str = "") -> List[Path]:
    """
    Staged files already present in a local directory.

    Looks under ``stage_dir/prefix`` first and falls back to ``stage_dir``.
    """
    stage_dir = Path(stage_dir)
    for candidate in (stage_dir / prefix, stage_dir):
        if candidate.is_dir():
            files = sorted(
                path for path in candidate.iterdir()
                if path.is_file() and path.suffix.lower() in STAGED_FILE_SUFFIXES
            )
            if files:
                return files
    raise FileNotFoundError(f"No staged files in {stage_dir}")


def read_staged_csv(paths: Iterable[Union[str, Path]]) -> pd.DataFrame:
    """
    Read staged CSV files into one DataFrame.

    The first line is the header, blank lines are skipped and surrounding
    whitespace is trimmed from every text value.
    """
    frames = []
    for path in paths:
        logger.info(f"Reading staged file {path}")
        df = pd.read_csv(path, skip_blank_lines=True, skipinitialspace=True)
        df.columns = [str(col).strip() for col in df.columns]
        for col in df.select_dtypes(include="object").columns:
            df[col] = df[col].str.strip()
        frames.append(df)

    if not frames:
        raise ValueError("No staged files to read")

    df = pd.concat(frames, ignore_index=True)
    logger.info(f"Read {len(df)} staged rows, {len(df.columns)} columns")
    return df


def match_columns(df: pd.DataFrame, table: Table) -> pd.DataFrame:
    """
    Align file columns with table columns by case-insensitive name.

    File columns with no table counterpart are dropped. Table columns absent
    from the file are filled with NULL, except columns with a server default
    which are left out so the database fills them.

    Args:
        df: Staged data
        table: Target table

    Returns:
        DataFrame whose columns are table column names.
    """
    by_lower = {str(col).lower(): col for col in df.columns}
    matched = {}
    for col in table.columns:
        source = by_lower.get(col.name.lower())
        if source is not None:
            matched[col.name] = df[source]
        elif col.server_default is None:
            matched[col.name] = pd.Series([None] * len(df), index=df.index, dtype=object)

    dropped = set(by_lower) - {name.lower() for name in matched}
    if dropped:
        logger.warning(f"Ignoring staged columns not in {table.name}: {sorted(dropped)}")

    return pd.DataFrame(matched, index=df.index)


def frame_to_records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """DataFrame rows as dictionaries with NaN/NaT replaced by None."""
    clean = df.astype(object).where(pd.notna(df), None)
    return clean.to_dict(orient="records")
