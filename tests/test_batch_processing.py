"""
Tests for directory batch processing.
"""

import pytest
import numpy as np
import cv2

from formula_normalizer.batch.directory_processor import (
    find_images, process_directory, process_directory_sequential
)
from formula_normalizer.data_models import ProcessingConfig
from formula_normalizer.exceptions import EmptyContentError


class TestFindImages:
    """Test suite for directory scanning."""

    def test_filters_by_extension(self, image_dir):
        names = [p.name for p in find_images(image_dir)]

        assert names == sorted(["blank.png", "formula_a.png", "formula_b.jpg", "formula_c.PNG"])

    def test_custom_extensions(self, image_dir):
        names = [p.name for p in find_images(image_dir, extensions=["jpg"])]
        assert names == ["formula_b.jpg"]

    def test_ignores_subdirectories(self, image_dir):
        (image_dir / "nested.png").mkdir()
        assert "nested.png" not in [p.name for p in find_images(image_dir)]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            find_images(tmp_path / "does_not_exist")

    def test_file_instead_of_directory(self, image_dir):
        with pytest.raises(NotADirectoryError):
            find_images(image_dir / "notes.txt")


class TestProcessDirectory:
    """Test suite for concurrent and sequential directory processing."""

    def test_concurrent_batch(self, image_dir, tmp_path):
        output_dir = tmp_path / "processed"

        results = process_directory(image_dir, output_dir, max_workers=2)

        assert results.total == 4
        assert results.processed == 3
        assert results.failed == 1
        assert results.processing_time >= 0.0

        failure = results.failures[0]
        assert failure.input_path.endswith("blank.png")
        assert failure.error

        for name in ["formula_a.png", "formula_b.jpg", "formula_c.PNG"]:
            written = cv2.imread(str(output_dir / name), cv2.IMREAD_GRAYSCALE)
            assert written is not None
            assert written.shape == (100, 300)

        assert not (output_dir / "blank.png").exists()
        assert not (output_dir / "notes.txt").exists()

    def test_results_are_sorted(self, image_dir, tmp_path):
        results = process_directory(image_dir, tmp_path / "processed")
        paths = [r.input_path for r in results.results]
        assert paths == sorted(paths)

    def test_custom_config_applies_to_all_files(self, image_dir, tmp_path):
        output_dir = tmp_path / "processed"
        config = ProcessingConfig(width=120, height=40, border=4)

        process_directory(image_dir, output_dir, config)

        written = cv2.imread(str(output_dir / "formula_a.png"), cv2.IMREAD_GRAYSCALE)
        assert written.shape == (40, 120)

    def test_inverted_file_matches_normal_file(self, image_dir, tmp_path):
        output_dir = tmp_path / "processed"
        process_directory(image_dir, output_dir)

        normal = cv2.imread(str(output_dir / "formula_a.png"), cv2.IMREAD_GRAYSCALE)
        inverted = cv2.imread(str(output_dir / "formula_c.PNG"), cv2.IMREAD_GRAYSCALE)
        assert np.array_equal(normal, inverted)

    def test_empty_directory(self, tmp_path):
        input_dir = tmp_path / "empty"
        input_dir.mkdir()

        results = process_directory(input_dir, tmp_path / "processed")

        assert results.total == 0
        assert results.failed == 0
        assert (tmp_path / "processed").is_dir()

    def test_sequential_batch(self, image_dir, tmp_path):
        output_dir = tmp_path / "processed"

        results = process_directory_sequential(image_dir, output_dir)

        assert results.total == 4
        assert results.processed == 3
        assert results.failed == 1
        assert (output_dir / "formula_a.png").exists()

    def test_sequential_fail_fast(self, image_dir, tmp_path):
        with pytest.raises(EmptyContentError):
            process_directory_sequential(image_dir, tmp_path / "processed", fail_fast=True)
