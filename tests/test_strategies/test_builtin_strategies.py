"""Tests for the built-in strategies."""

from strategies.corner import CornerStrategy
from strategies.random_strategy import RandomStrategy
from strategies.scripted import ScriptedStrategy

OPEN = {"left": False, "right": False, "up": False, "down": False}


def walls(**edges):
    result = dict(OPEN)
    result.update(edges)
    return lambda: result


class TestCornerStrategy:
    def test_hider_goes_down_first(self):
        moves = []
        CornerStrategy().hider(walls(), walls(), lambda: 90, moves.append)
        assert moves == ["down"]

    def test_hider_goes_right_on_bottom_edge(self):
        moves = []
        CornerStrategy().hider(walls(down=True), walls(), lambda: 90, moves.append)
        assert moves == ["right"]

    def test_hider_stops_in_corner(self):
        moves = []
        CornerStrategy().hider(walls(down=True, right=True), walls(), lambda: 90, moves.append)
        assert moves == []

    def test_seeker_left_then_up(self):
        moves = []
        strategy = CornerStrategy()
        strategy.seeker(walls(), walls(), lambda: 80, moves.append)
        strategy.seeker(walls(left=True), walls(), lambda: 79, moves.append)
        assert moves == ["left", "up"]


class TestRandomStrategy:
    def test_only_open_directions(self):
        blocked = walls(left=True, up=True, right=True)
        moves = []
        strategy = RandomStrategy(seed=3)
        for _ in range(10):
            strategy.hider(walls(), blocked, lambda: 90, moves.append)
        assert moves == ["down"] * 10

    def test_fully_blocked_requests_nothing(self):
        blocked = walls(left=True, up=True, right=True, down=True)
        moves = []
        RandomStrategy(seed=3).seeker(walls(), blocked, lambda: 90, moves.append)
        assert moves == []

    def test_seed_reproducible(self):
        first, second = [], []
        a, b = RandomStrategy(seed=11), RandomStrategy(seed=11)
        for _ in range(20):
            a.seeker(walls(), walls(), lambda: 90, first.append)
            b.seeker(walls(), walls(), lambda: 90, second.append)
        assert first == second

    def test_reset_seed(self):
        strategy = RandomStrategy(seed=5)
        first = []
        for _ in range(5):
            strategy.hider(walls(), walls(), lambda: 90, first.append)
        strategy.reset_seed(5)
        second = []
        for _ in range(5):
            strategy.hider(walls(), walls(), lambda: 90, second.append)
        assert first == second


class TestScriptedStrategy:
    def test_plays_script_then_idles(self):
        strategy = ScriptedStrategy(hider_moves=["down", None, "right"])
        moves = []
        for _ in range(5):
            strategy.hider(walls(), walls(), lambda: 90, moves.append)
        assert moves == ["down", "right"]

    def test_restarts_each_match(self):
        strategy = ScriptedStrategy(seeker_moves=["up"])
        moves = []
        strategy.seeker(walls(), walls(), lambda: 90, moves.append)
        strategy.on_match_start(None, 10, frozenset())
        strategy.seeker(walls(), walls(), lambda: 90, moves.append)
        assert moves == ["up", "up"]
