"""Tests for the trial aggregator."""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest

from loop_sweep import aggregator
from loop_sweep.aggregator import run_trials
from loop_sweep.common import TrialResult
from loop_sweep.errors import InvalidParameter, InvalidTrialCount


class TestRunTrials:
    """Tests for run_trials()."""

    def test_returns_trial_result(self):
        result = run_trials(10, 500)
        assert isinstance(result, TrialResult)
        assert result.x == 10
        assert 1.0 <= result.avg <= 10.0

    def test_bound_one_averages_exactly_one(self):
        assert run_trials(1, 300, block_size=7).avg == 1.0

    def test_mean_of_exactly_t_samples(self):
        """The mean divides the sum of exactly `trials` samples by `trials`."""
        with ThreadPoolExecutor(max_workers=1) as ex, \
                patch("loop_sweep.sampler.generate", return_value=3) as gen:
            result = run_trials(10, 1234, executor=ex, block_size=100)
        assert gen.call_count == 1234
        assert result.avg == 3.0

    def test_one_producer_per_block(self):
        with patch.object(aggregator, "_draw_block", wraps=aggregator._draw_block) as draw:
            run_trials(10, 1000, block_size=200)
        assert draw.call_count == 5
        counts = sorted(c.args[1] for c in draw.call_args_list)
        assert counts == [200] * 5

    def test_uses_given_executor(self):
        with ThreadPoolExecutor(max_workers=2) as ex:
            result = run_trials(5, 1000, executor=ex, block_size=100)
            # The executor is still usable: run_trials does not shut it down.
            assert ex.submit(lambda: 1).result() == 1
        assert result.x == 5

    def test_seeded_runs_are_reproducible(self):
        a = run_trials(50, 5000, block_size=1000, seed=7)
        b = run_trials(50, 5000, block_size=1000, seed=7)
        assert a == b

    def test_seed_result_independent_of_pool_size(self):
        with ThreadPoolExecutor(max_workers=1) as one, ThreadPoolExecutor(max_workers=4) as four:
            a = run_trials(80, 4000, executor=one, block_size=500, seed=3)
            b = run_trials(80, 4000, executor=four, block_size=500, seed=3)
        assert a.avg == b.avg

    @pytest.mark.slow
    def test_mean_converges(self):
        """100k samples of [1, x] average within 2% of (x + 1) / 2."""
        x = 100
        result = run_trials(x, 100_000)
        expected = (x + 1) / 2
        assert result.avg == pytest.approx(expected, rel=0.02)

    @pytest.mark.parametrize("trials", [0, -1])
    def test_invalid_trial_count_raises(self, trials):
        with patch("loop_sweep.sampler.generate") as gen:
            with pytest.raises(InvalidTrialCount):
                run_trials(10, trials)
        gen.assert_not_called()

    def test_invalid_bound_raises(self):
        with patch("loop_sweep.sampler.generate") as gen:
            with pytest.raises(InvalidParameter):
                run_trials(0, 100)
        gen.assert_not_called()

    def test_producer_error_propagates(self):
        with patch("loop_sweep.sampler.generate", side_effect=RuntimeError("boom")):
            with pytest.raises(RuntimeError, match="boom"):
                run_trials(10, 100, block_size=10)

    def test_short_producer_detected(self):
        """A producer reporting fewer samples than requested is an error."""
        with patch.object(aggregator, "_draw_block", return_value=(1, 5)):
            with pytest.raises(RuntimeError, match="sample count mismatch"):
                run_trials(10, 100, block_size=10)
