"""Tests for best score and leaderboard queries."""

import pytest

from walletscore.core.modules.score.models import ScoreRecord
from walletscore.errors import MissingFieldsError


@pytest.fixture
async def seeded(core, database):
    """Leaderboard service over a few stored scores."""
    collection = database.get_collection("scores")
    for wallet, game, score in [("A", "snake", 10), ("A", "snake", 30), ("B", "snake", 20), ("A", "tetris", 99)]:
        await collection.insert_one(ScoreRecord(wallet=wallet, game=game, score=score).to_mongo())
    return core.services.leaderboard


class TestBestScore:
    """Tests for get_best_score."""

    async def test_highest_for_wallet_and_game(self, seeded):
        """Test that the best score ignores other wallets and games."""
        best = await seeded.get_best_score("A", "snake")
        assert best is not None
        assert best.score == 30

    async def test_none_when_no_scores(self, seeded):
        assert await seeded.get_best_score("C", "snake") is None

    async def test_missing_params(self, seeded):
        with pytest.raises(MissingFieldsError):
            await seeded.get_best_score("A", "")


class TestLeaderboard:
    """Tests for get_leaderboard."""

    async def test_ordered_descending(self, seeded):
        scores = await seeded.get_leaderboard("snake")
        assert [s.score for s in scores] == [30, 20, 10]

    async def test_capped_at_fifty(self, core, database):
        """Test that at most 50 scores are returned, highest first."""
        collection = database.get_collection("scores")
        for i in range(60):
            await collection.insert_one(ScoreRecord(wallet=f"W{i}", game="snake", score=i).to_mongo())
        scores = await core.services.leaderboard.get_leaderboard("snake")
        assert len(scores) == 50
        assert scores[0].score == 59

    @pytest.mark.parametrize("limit", [0, -5])
    async def test_non_positive_limit_clamped(self, seeded, limit):
        """Test that a zero or negative limit returns the top score rather than every score."""
        scores = await seeded.get_leaderboard("snake", limit=limit)
        assert [s.score for s in scores] == [30]

    async def test_missing_game(self, seeded):
        with pytest.raises(MissingFieldsError):
            await seeded.get_leaderboard("")
