"""
Directory Batch Processing

Normalizes every supported image in a directory, either concurrently on a
thread pool or one file at a time. A failing image is logged and recorded;
it never stops the rest of the batch unless fail-fast is requested.
"""

import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Iterable, List, Optional, Union
import logging

from ..data_models import BatchResults, FileResult, ProcessingConfig
from ..pipeline import FormulaNormalizer
from ..utils.image_io import SUPPORTED_EXTENSIONS, is_supported_image

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def find_images(input_dir: PathLike, extensions: Iterable[str] = SUPPORTED_EXTENSIONS) -> List[Path]:
    """
    List the supported image files directly inside a directory.

    Raises:
        FileNotFoundError: If input_dir does not exist
        NotADirectoryError: If input_dir is not a directory
    """
    input_dir = Path(input_dir)
    if not input_dir.exists():
        raise FileNotFoundError(f"Input directory does not exist: {input_dir}")
    if not input_dir.is_dir():
        raise NotADirectoryError(f"Input path is not a directory: {input_dir}")

    extensions = tuple(extensions)
    return sorted(p for p in input_dir.iterdir() if p.is_file() and is_supported_image(p, extensions))


def _process_one(normalizer: FormulaNormalizer, input_path: Path, output_path: Path) -> FileResult:
    try:
        normalizer.process_file(input_path, output_path)
    except Exception as e:
        logger.error(f"Error processing file {input_path}: {e}")
        return FileResult(str(input_path), str(output_path), success=False, error=str(e))

    return FileResult(str(input_path), str(output_path), success=True)


def _summarize(results: List[FileResult], start_time: float) -> BatchResults:
    results.sort(key=lambda r: r.input_path)
    processed = sum(1 for r in results if r.success)

    batch = BatchResults(
        results=results,
        processed=processed,
        failed=len(results) - processed,
        processing_time=time.time() - start_time,
    )
    logger.info(f"Batch complete: {batch.processed}/{batch.total} images normalized, "
                f"{batch.failed} failed ({batch.processing_time:.2f}s)")
    return batch


def process_directory(input_dir: PathLike,
                      output_dir: PathLike,
                      config: Optional[ProcessingConfig] = None,
                      max_workers: Optional[int] = None,
                      extensions: Iterable[str] = SUPPORTED_EXTENSIONS) -> BatchResults:
    """
    Normalize all images of a directory concurrently.

    Args:
        input_dir: Directory holding png/jpg/jpeg files
        output_dir: Destination directory (created if missing); file names are kept
        config: Canvas geometry shared by every worker
        max_workers: Upper bound on concurrent tasks. None lets the pool decide.
        extensions: Accepted file extensions

    Returns:
        BatchResults with one FileResult per input image
    """
    start_time = time.time()
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    files = find_images(input_dir, extensions)
    normalizer = FormulaNormalizer(config)

    logger.info(f"Processing {len(files)} images from {input_dir} "
                f"(max_workers={max_workers or 'auto'})")

    results = []
    if files:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            future_to_file = {
                executor.submit(_process_one, normalizer, path, output_dir / path.name): path
                for path in files
            }

            for future in as_completed(future_to_file):
                results.append(future.result())

    return _summarize(results, start_time)


def process_directory_sequential(input_dir: PathLike,
                                 output_dir: PathLike,
                                 config: Optional[ProcessingConfig] = None,
                                 fail_fast: bool = False,
                                 extensions: Iterable[str] = SUPPORTED_EXTENSIONS) -> BatchResults:
    """
    Normalize all images of a directory one at a time.

    Args:
        input_dir: Directory holding png/jpg/jpeg files
        output_dir: Destination directory (created if missing)
        config: Canvas geometry
        fail_fast: Re-raise the first per-image error instead of recording it
        extensions: Accepted file extensions

    Returns:
        BatchResults with one FileResult per processed image
    """
    start_time = time.time()
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    files = find_images(input_dir, extensions)
    normalizer = FormulaNormalizer(config)

    logger.info(f"Processing {len(files)} images from {input_dir} sequentially")

    results = []
    for path in files:
        output_path = output_dir / path.name
        if fail_fast:
            normalizer.process_file(path, output_path)
            results.append(FileResult(str(path), str(output_path), success=True))
        else:
            results.append(_process_one(normalizer, path, output_path))

    return _summarize(results, start_time)
