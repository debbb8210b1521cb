import io

import run_sweeps
from config import SimulationConfig
from models import black_scholes_price


def _render(config, clock):
    out = io.StringIO()
    run_sweeps.render_report(config, out, clock=clock)
    return out.getvalue()


def test_report_layout(small_config, frozen_clock):
    lines = _render(small_config, frozen_clock).splitlines()

    header = (
        "sample_size, estimated_price, estimated_standard_error, "
        "95_percent_confidence_interval_lower, 95_percent_confidence_interval_upper, "
        "runtime_in_seconds, efficiency"
    )
    bsm = black_scholes_price(small_config.model_parameters)
    assert lines[0] == f"BSM Deterministic Call Price: {bsm}"
    assert lines[1] == ""
    assert lines[2] == "CSV Data table for Stochastic BSM Simulation using Direct Method."
    assert lines[3] == header
    assert [row.split(", ")[0] for row in lines[4:7]] == ["100", "1000", "10000"]
    assert lines[7] == ""
    assert lines[8] == "CSV Data table for Stochastic BSM Simulation using Antithetic Method."
    assert lines[9] == header
    assert [row.split(", ")[0] for row in lines[10:12]] == ["400", "4000"]
    assert len(lines) == 12

    for row in lines[4:7] + lines[10:12]:
        fields = row.split(", ")
        assert len(fields) == 7
        assert "nan" not in row


def test_fixed_seed_reports_are_byte_identical(small_config, frozen_clock):
    assert _render(small_config, frozen_clock) == _render(small_config, frozen_clock)


def test_different_seeds_give_different_reports(small_config, frozen_clock):
    other = small_config.with_overrides(seed=small_config.seed + 1)
    assert _render(small_config, frozen_clock) != _render(other, frozen_clock)


def test_main_prints_report(capsys):
    code = run_sweeps.main(
        [
            "--seed", "3",
            "--direct-runs", "2",
            "--direct-base", "10",
            "--antithetic-runs", "1",
            "--antithetic-base", "20",
        ]
    )
    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out[0].startswith("BSM Deterministic Call Price: ")
    assert out[4].startswith("10, ")
    assert out[5].startswith("100, ")
    assert out[9].startswith("20, ")


def test_main_reads_yaml_and_flags_win(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("seed: 1\ndirect_run_count: 4\n", encoding="utf-8")
    args = run_sweeps.parse_args(["--config", str(path), "--direct-runs", "2"])
    config = run_sweeps.build_config(args)
    assert config.seed == 1
    assert config.direct_run_count == 2


def test_main_rejects_invalid_configuration(capsys):
    assert run_sweeps.main(["--multiplier", "1"]) == 2
    assert capsys.readouterr().out == ""


def test_strategy_order():
    sweeps = run_sweeps.strategy_sweeps(SimulationConfig())
    assert [s.value for s, _, _ in sweeps] == ["direct", "antithetic"]
    assert sweeps[0][1:] == (6, 1000)
    assert sweeps[1][1:] == (5, 4000)


def test_random_seed_flag_clears_a_seed_from_yaml(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("seed: 42\n", encoding="utf-8")
    args = run_sweeps.parse_args(["--config", str(path), "--random-seed"])
    assert run_sweeps.build_config(args).seed is None


def test_seed_and_random_seed_are_exclusive():
    import pytest

    with pytest.raises(SystemExit):
        run_sweeps.parse_args(["--seed", "1", "--random-seed"])
