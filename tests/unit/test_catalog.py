"""Unit tests for catalog scaffolding."""

import pytest
from demohub.scaffold.catalog import (
    CATALOG_DIRECTORIES,
    PLACEHOLDER_FILES,
    add_gitkeep,
    create_catalog_tree,
)


class TestCatalogLayout:
    """Test the fixed catalog layout."""

    def test_directory_count(self):
        """Test every directory of the course tree is listed once."""
        assert len(CATALOG_DIRECTORIES) == 88
        assert len(set(CATALOG_DIRECTORIES)) == len(CATALOG_DIRECTORIES)

    def test_commons_first(self):
        """Test commons datasets come first, in numbered order."""
        assert CATALOG_DIRECTORIES[:6] == [
            "00_commons/datasets/01_sales_db",
            "00_commons/datasets/02_cares_db",
            "00_commons/datasets/03_orders_db",
            "00_commons/datasets/04_iot_db",
            "00_commons/datasets/05_medis_db",
            "00_commons/utils",
        ]
        assert CATALOG_DIRECTORIES[-1] == "09_knowledge/05_training_materials/certification_prep"

    def test_placeholder_files(self):
        """Test placeholder files."""
        assert len(PLACEHOLDER_FILES) == 34
        assert "01_advanced_warehousing/08_jmeter_testing/01_08_01_load_test.jmx" in PLACEHOLDER_FILES
        assert "04_genai_llms/01_embeddings_vector_search/04_01_02_embedding_generation.py" in PLACEHOLDER_FILES
        assert PLACEHOLDER_FILES[-1] == "00_commons/datasets/04_iot_db/00_01_02_iot_model.sql"


class TestCreateCatalogTree:
    """Test create_catalog_tree."""

    def test_creates_directories_with_gitkeep(self, tmp_path):
        """Test every directory exists and holds a .gitkeep."""
        tree = create_catalog_tree(tmp_path)

        assert tree.root == tmp_path
        assert tree.directories == CATALOG_DIRECTORIES
        for directory in CATALOG_DIRECTORIES:
            assert (tmp_path / directory).is_dir()
            assert (tmp_path / directory / ".gitkeep").is_file()

    def test_creates_empty_placeholder_files(self, tmp_path):
        """Test placeholder files are created empty."""
        tree = create_catalog_tree(tmp_path)

        assert tree.files == PLACEHOLDER_FILES
        for file_name in PLACEHOLDER_FILES:
            path = tmp_path / file_name
            assert path.is_file()
            assert path.stat().st_size == 0

    def test_idempotent_and_keeps_content(self, tmp_path):
        """Test re-running keeps existing file content."""
        create_catalog_tree(tmp_path)
        script = tmp_path / "01_advanced_warehousing/01_data_quality_metrics/01_01_01_metrics_functions.sql"
        script.write_text("SELECT 1;")

        create_catalog_tree(tmp_path)

        assert script.read_text() == "SELECT 1;"

    def test_creates_missing_root(self, tmp_path):
        """Test the root directory is created when absent."""
        root = tmp_path / "catalog"
        create_catalog_tree(root)
        assert (root / "00_commons" / "utils" / ".gitkeep").is_file()


class TestAddGitkeep:
    """Test add_gitkeep."""

    def test_empty_directories_get_gitkeep(self, tmp_path):
        """Test only empty directories receive a .gitkeep."""
        (tmp_path / "a" / "empty").mkdir(parents=True)
        (tmp_path / "b").mkdir()
        (tmp_path / "b" / "notes.md").write_text("notes")

        touched = add_gitkeep(tmp_path)

        assert touched == [tmp_path / "a" / "empty"]
        assert (tmp_path / "a" / "empty" / ".gitkeep").is_file()
        assert not (tmp_path / "a" / ".gitkeep").exists()
        assert not (tmp_path / "b" / ".gitkeep").exists()

    def test_hidden_directories_skipped(self, tmp_path):
        """Test hidden directories and their children are skipped."""
        (tmp_path / ".git" / "refs").mkdir(parents=True)
        (tmp_path / "docs").mkdir()

        touched = add_gitkeep(tmp_path)

        assert touched == [tmp_path / "docs"]
        assert not (tmp_path / ".git" / "refs" / ".gitkeep").exists()

    def test_empty_root(self, tmp_path):
        """Test an empty root receives a .gitkeep."""
        assert add_gitkeep(tmp_path) == [tmp_path]
        assert (tmp_path / ".gitkeep").is_file()

    def test_second_run_touches_nothing(self, tmp_path):
        """Test directories holding a .gitkeep are no longer empty."""
        (tmp_path / "x").mkdir()
        add_gitkeep(tmp_path)
        assert add_gitkeep(tmp_path) == []

    def test_missing_root(self, tmp_path):
        """Test a missing root raises."""
        with pytest.raises(NotADirectoryError):
            add_gitkeep(tmp_path / "missing")
