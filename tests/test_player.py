"""Test per il conto giocatore."""

from decimal import Decimal

from betting_ledger.betting import Player


class TestPlayer:
    """Test suite per Player."""

    def setup_method(self):
        """Setup per ogni test."""
        self.player = Player("p1")

    def test_new_player_is_empty(self):
        """Test giocatore nuovo."""
        assert self.player.balance == 0
        assert self.player.total_bets == 0
        assert self.player.won_bets == 0

    def test_deposit(self):
        """Test deposito."""
        self.player.deposit(100)
        self.player.deposit(50)
        assert self.player.balance == 150

    def test_withdraw_success(self):
        """Test prelievo con fondi sufficienti."""
        self.player.deposit(100)
        assert self.player.withdraw(100) is True
        assert self.player.balance == 0

    def test_withdraw_insufficient(self):
        """Test prelievo oltre il saldo."""
        self.player.deposit(100)
        assert self.player.withdraw(101) is False
        assert self.player.balance == 100

    def test_settle_bet_win_credits_stake(self):
        """Test vincita: accredita la puntata, non la puntata per la quota."""
        self.player.deposit(100)
        self.player.settle_bet(50.0, won=True)
        assert self.player.balance == 150
        assert self.player.total_bets == 1
        assert self.player.won_bets == 1

    def test_settle_bet_truncates_amount(self):
        """Test troncamento dell'importo."""
        self.player.deposit(100)
        self.player.settle_bet(10.9, won=True)
        assert self.player.balance == 110
        self.player.settle_bet(10.9, won=False)
        assert self.player.balance == 100

    def test_settle_bet_can_go_negative(self):
        """Test perdita oltre il saldo."""
        self.player.settle_bet(30.0, won=False)
        assert self.player.balance == -30
        assert self.player.is_legitimate is False

    def test_win_rate_zero_without_bets(self):
        """Test win rate senza scommesse."""
        assert self.player.win_rate() == 0
        assert str(self.player.win_rate()) == "0"

    def test_win_rate_rounding_half_up(self):
        """Test arrotondamento half-up."""
        for won in (True, True, False):
            self.player.settle_bet(0, won)
        assert self.player.win_rate() == Decimal("0.67")

        player = Player("p2")
        for won in (True, False, False, False, False, False, False, False):
            player.settle_bet(0, won)
        # 1/8 = 0.125
        assert player.win_rate() == Decimal("0.13")

    def test_win_rate_format(self):
        """Test formato a due decimali."""
        self.player.settle_bet(0, True)
        self.player.settle_bet(0, False)
        assert str(self.player.win_rate()) == "0.50"

    def test_won_bets_never_exceed_total(self):
        """Test invariante won_bets <= total_bets."""
        for i in range(20):
            self.player.settle_bet(1, won=(i % 3 == 0))
            assert self.player.won_bets <= self.player.total_bets
