from scripts.simulate import simulate


def test_simulate_summary():
    summary = simulate(20, seed=5)
    assert sum(summary["outcomes"].values()) == 20
    assert summary["avg_rounds"] > 0
    assert summary == simulate(20, seed=5)
