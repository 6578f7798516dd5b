"""Tests for the catalog CLI commands."""

from click.testing import CliRunner

from category_sorter.cli.catalog_cli import categories, classify


class TestClassifyCommand:
    """Test the classify command."""

    def test_classifies_names(self):
        runner = CliRunner()
        result = runner.invoke(classify, ["photo.JPG", "notes.pdf", "README"])

        assert result.exit_code == 0
        assert "Image Files" in result.output
        assert "PDF Files" in result.output
        assert "Others" in result.output

    def test_files_need_not_exist(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(classify, [str(tmp_path / "missing.mp3")])

        assert result.exit_code == 0
        assert "Audio Files" in result.output

    def test_requires_a_path(self):
        runner = CliRunner()
        result = runner.invoke(classify, [])

        assert result.exit_code != 0


class TestCategoriesCommand:
    """Test the categories command."""

    def test_lists_categories(self):
        runner = CliRunner()
        result = runner.invoke(categories, [])

        assert result.exit_code == 0
        assert "26 categories" in result.output
        assert "Others" in result.output

    def test_with_aliases(self):
        runner = CliRunner()
        result = runner.invoke(categories, ["--aliases"])

        assert result.exit_code == 0
        assert "26 categories" in result.output
