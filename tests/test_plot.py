import matplotlib.pyplot as plt

from speechrhythm.solvers.solver import Simulator
from speechrhythm.view.plot import plot_durations, save_plot


def test_plot_durations(reference_params):
    result = Simulator(reference_params).run(2, 1, "4 4", "1 0.5")
    fig = plot_durations(result)
    ax = fig.axes[0]
    # Line plus markers
    assert len(ax.lines) >= 2
    assert len(ax.get_xticks()) == result.unit_count
    assert ax.get_ylabel() == "V-to-V duration (ms)"
    plt.close(fig)


def test_plot_into_existing_axes(reference_params):
    result = Simulator(reference_params).run(1, 0, "3", "1")
    fig, ax = plt.subplots()
    assert plot_durations(result, ax=ax) is fig
    plt.close(fig)


def test_save_plot(tmp_path, reference_params):
    result = Simulator(reference_params).run(2, 1, "4 4", "1 0.5")
    path = tmp_path / "durations.png"
    save_plot(result, str(path))
    assert path.exists()
