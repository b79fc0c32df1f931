"""Tests for jobs."""

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from arenalog.jobs.download_cards import main, run_download


@pytest.fixture
def downloaded_catalog(tmp_path: Path) -> Path:
    path = tmp_path / "default-cards.json"
    path.write_text(
        json.dumps(
            [
                {"id": "c1", "name": "Alpha", "arena_id": 123},
                {"id": "c2", "name": "Beta"},
            ]
        ),
        encoding="utf-8",
    )
    return path


class TestRunDownload:
    @pytest.mark.asyncio
    async def test_run_download_success(self, downloaded_catalog: Path, caplog):
        """Test download job saves and loads the catalog."""
        with patch(
            "arenalog.jobs.download_cards.download_card_catalog",
            new_callable=AsyncMock,
            return_value=downloaded_catalog,
        ) as mock_download:
            caplog.set_level("INFO", logger="arenalog.jobs.download_cards")
            path = await run_download(downloaded_catalog)

        assert path == downloaded_catalog
        mock_download.assert_awaited_once_with(downloaded_catalog)
        assert "has 2 cards, 1 with Arena IDs" in caplog.text

    @pytest.mark.asyncio
    async def test_run_download_reraises(self):
        """Test download job propagates failures."""
        with (
            patch(
                "arenalog.jobs.download_cards.download_card_catalog",
                new_callable=AsyncMock,
                side_effect=ValueError("Could not find default_cards bulk data URL"),
            ),
            pytest.raises(ValueError),
        ):
            await run_download()

    @pytest.mark.asyncio
    async def test_unloadable_download_fails(self, tmp_path: Path):
        """Test a saved catalog that does not parse fails the job."""
        path = tmp_path / "default-cards.json"
        path.write_text("<html>rate limited</html>", encoding="utf-8")

        with (
            patch(
                "arenalog.jobs.download_cards.download_card_catalog",
                new_callable=AsyncMock,
                return_value=path,
            ),
            pytest.raises(ValueError, match="not valid JSON"),
        ):
            await run_download(path)


class TestMain:
    def test_output_argument(self, downloaded_catalog: Path):
        with patch(
            "arenalog.jobs.download_cards.download_card_catalog",
            new_callable=AsyncMock,
            return_value=downloaded_catalog,
        ) as mock_download:
            main(["--output", str(downloaded_catalog)])

        mock_download.assert_awaited_once_with(downloaded_catalog)
