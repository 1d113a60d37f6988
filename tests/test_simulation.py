import unittest

from wordle_assist.errors import SolverContradiction
from wordle_assist.simulation import GameResult, Simulation, simulate_game, wordle_feedback
from wordle_assist.words import ALL_GREEN, Feedback, Filter, Word, load_words_from_file

B, Y, G = Feedback.BLACK, Feedback.YELLOW, Feedback.GREEN


def W(text: str) -> Word:
    return Word.from_text(text)


def words(*texts: str):
    return [W(t) for t in texts]


class TestWordleFeedback(unittest.TestCase):
    def test_exact(self) -> None:
        assert wordle_feedback(W("ready"), W("ready")) == ALL_GREEN

    def test_repeated_guess_letter(self) -> None:
        # second e of "speed" lines up with the e of "cider"; the first gets no budget
        assert wordle_feedback(W("cider"), W("speed")) == (B, B, B, G, Y)
        # only one e in "lodge": first e yellow, second black
        assert wordle_feedback(W("lodge"), W("speed")) == (B, B, Y, B, Y)

    def test_green_takes_precedence_over_earlier_yellow(self) -> None:
        assert wordle_feedback(W("humor"), W("honor")) == (G, B, B, G, G)

    def test_repeated_secret_letter(self) -> None:
        assert wordle_feedback(W("eerie"), W("there")) == (B, B, Y, Y, G)
        assert wordle_feedback(W("abbey"), W("babes")) == (Y, Y, G, G, B)

    def test_secret_matches_its_own_feedback(self) -> None:
        pool = load_words_from_file()
        guesses = pool[::97]
        for secret in pool[::211]:
            f = Filter()
            for guess in guesses:
                f.restrict(guess, wordle_feedback(secret, guess))
                assert secret.matches(f), (secret, guess)


class TestSimulation(unittest.TestCase):
    def test_solved_in_one_round(self) -> None:
        sim = Simulation(W("ready"), words("ready"))
        rounds = list(sim.run())
        assert rounds == [(W("ready"), ALL_GREEN)]
        assert sim.rounds == rounds

    def test_solves_against_full_dictionary(self) -> None:
        pool = load_words_from_file()
        sim = Simulation(W("ready"), pool)
        rounds = list(sim.run())
        assert rounds[-1] == (W("ready"), ALL_GREEN)
        assert all(fb != ALL_GREEN for _, fb in rounds[:-1])
        guesses = [g for g, _ in rounds]
        assert len(set(guesses)) == len(guesses)
        for guess, feedback in rounds:
            assert feedback == wordle_feedback(W("ready"), guess)

    def test_secret_is_never_excluded(self) -> None:
        pool = load_words_from_file()
        for secret in pool[::331]:
            sim = Simulation(secret, pool)
            for _ in sim.run():
                assert secret.matches(sim.game.filter)
                assert secret in sim.game.words()

    def test_run_is_lazy(self) -> None:
        pool = load_words_from_file()
        sim = Simulation(W("lodge"), pool)
        it = sim.run()
        assert sim.rounds == []
        next(it)
        assert len(sim.rounds) == 1

    def test_unknown_secret_raises(self) -> None:
        sim = Simulation(W("ready"), words("cider", "speed"))
        it = sim.run()
        guess, feedback = next(it)
        assert guess == W("cider")
        assert feedback == (B, B, Y, Y, Y)
        with self.assertRaises(SolverContradiction) as ctx:
            next(it)
        assert ctx.exception.secret == "ready"
        assert ctx.exception.rounds == [("cider", "bbyyy")]

    def test_empty_dictionary_raises(self) -> None:
        with self.assertRaises(SolverContradiction):
            list(Simulation(W("ready"), []).run())


class TestSimulateGame(unittest.TestCase):
    def test_solved(self) -> None:
        result = simulate_game(W("speed"), words("ready", "cider", "speed"))
        assert result == GameResult(
            secret="speed", solved=True, turns=2, first_guess="ready", final_candidates=1
        )

    def test_max_turns(self) -> None:
        result = simulate_game(W("speed"), words("ready", "cider", "speed"), max_turns=1)
        assert not result.solved
        assert not result.contradiction
        assert result.turns == 1
        assert result.first_guess == "ready"
        assert result.final_candidates == 1

    def test_contradiction(self) -> None:
        result = simulate_game(W("ready"), words("cider", "speed"))
        assert not result.solved
        assert result.contradiction
        assert result.turns == 1
        assert result.final_candidates == 0
