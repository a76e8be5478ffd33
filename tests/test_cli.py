"""
Tests for the nn-feature-select command line
"""

import json

import pytest

from nn_feature_select.cli import build_parser, main


DATA = (
    "1.0  0.0  5.0\n"
    "1.0  0.0  6.0\n"
    "2.0 10.0  5.0\n"
    "2.0 10.0  6.0\n"
)


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "small.txt"
    path.write_text(DATA)
    return path


class TestMain:
    @pytest.mark.parametrize("algorithm", ["1", "forward", "2", "backward", "3", "pruned"])
    def test_runs_every_algorithm(self, data_file, capsys, algorithm):
        assert main([str(data_file), "-a", algorithm]) == 0
        out = capsys.readouterr().out
        assert "This dataset has 2 features" in out
        assert "with 4 instances" in out
        assert "Finished search!!" in out

    @pytest.mark.parametrize("algorithm", ["forward", "pruned"])
    def test_forward_finds_separating_feature(self, data_file, capsys, algorithm):
        assert main([str(data_file), "-a", algorithm]) == 0
        out = capsys.readouterr().out
        assert "The best feature subset is {1}, which has an accuracy of 100.0%" in out

    def test_menu_prompt(self, data_file, capsys, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda: "2")
        assert main([str(data_file)]) == 0
        out = capsys.readouterr().out
        assert "2) Backward Elimination" in out
        assert "Using all features {1, 2}" in out

    def test_file_prompt(self, data_file, capsys, monkeypatch):
        answers = iter([str(data_file), "1"])
        monkeypatch.setattr("builtins.input", lambda: next(answers))
        assert main([]) == 0
        assert "Finished search!!" in capsys.readouterr().out

    def test_invalid_menu_choice(self, data_file, capsys, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda: "9")
        assert main([str(data_file)]) == 2
        assert "Unknown algorithm" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.txt"), "-a", "1"]) == 1
        assert "Unable to open file" in capsys.readouterr().err

    def test_malformed_file(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_text("1 0.5 0.6\n2 0.7\n")
        assert main([str(path), "-a", "1"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_degenerate_column(self, tmp_path, capsys):
        path = tmp_path / "flat.txt"
        path.write_text("1 0.5 3.0\n2 0.7 3.0\n1 0.9 3.0\n")
        assert main([str(path), "-a", "1"]) == 1
        assert "zero variance" in capsys.readouterr().err

    def test_json_output(self, data_file, tmp_path):
        out_path = tmp_path / "report.json"
        assert main([str(data_file), "-a", "pruned", "--json", str(out_path)]) == 0
        report = json.loads(out_path.read_text())
        assert report["strategy"] == "pruned"
        assert report["best_subset"] == [1]
        assert report["best_accuracy"] == 1.0

    def test_plot_output(self, data_file, tmp_path):
        png = tmp_path / "trace.png"
        assert main([str(data_file), "-a", "forward", "--plot", str(png)]) == 0
        assert png.exists()

    def test_unexpected_error_is_not_reported_as_invalid_choice(
        self, data_file, monkeypatch, capsys
    ):
        def broken_search(dataset, strategy):
            raise ValueError("internal failure")

        monkeypatch.setattr("nn_feature_select.cli.run_search", broken_search)
        with pytest.raises(ValueError, match="internal failure"):
            main([str(data_file), "-a", "1"])
        assert "Invalid choice" not in capsys.readouterr().err


class TestParser:
    def test_rejects_unknown_algorithm(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["data.txt", "-a", "exhaustive"])

    def test_verbosity_counts(self):
        args = build_parser().parse_args(["data.txt", "-vv"])
        assert args.verbose == 2
