"""Test per il report finale."""

import pandas as pd

from betting_ledger.betting import BettingSystem, Side
from betting_ledger.reporting import ResultsReport


class TestResultsReport:
    """Test per ResultsReport."""

    def setup_method(self):
        """Setup per ogni test."""
        self.system = BettingSystem()
        self.system.add_match("M", 2.0, 1.5, Side.A)
        self.system.deposit("alice", 100)
        self.system.process_bet("alice", "M", Side.A, 50)
        self.system.process_bet("alice", "M", Side.B, 20)
        self.system.add_player("bob").settle_bet(30, won=False)
        self.system.add_player("carol").settle_bet(5, won=False)
        self.system.add_player("dave")
        self.report = ResultsReport(self.system)

    def test_generate_text(self):
        """Test formato del report."""
        expected = (
            "Legitimate Players:\n"
            "alice 130 0.50\n"
            "bob -30 0.00\n"
            "carol -5 0.00\n"
            "dave 0 0\n"
            "\n"
            "Illegitimate Players:\n"
            "bob BET null null null -30\n"
            "\n"
            "Casino Balance Change:\n"
            "50\n"
        )
        assert self.report.generate_text() == expected

    def test_no_illegitimate_players(self):
        """Test sezione irregolari vuota."""
        system = BettingSystem()
        system.deposit("alice", 10)
        text = ResultsReport(system).generate_text()
        assert "Illegitimate Players:\n\nCasino Balance Change:\n0\n" in text

    def test_write(self, tmp_path):
        """Test scrittura su file."""
        path = tmp_path / "out" / "results.txt"
        self.report.write(path)
        assert path.read_text(encoding="utf-8") == self.report.generate_text()

    def test_export_to_csv(self, tmp_path):
        """Test export CSV."""
        path = tmp_path / "players.csv"
        self.report.export_to_csv(path)

        df = pd.read_csv(path)
        assert list(df["player_id"]) == ["alice", "bob", "carol", "dave"]
        assert list(df["legitimate"]) == [True, False, False, True]
        assert df.loc[0, "win_rate"] == 0.5
