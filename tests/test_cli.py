"""
tests/test_cli.py

Pytest tests for the interactive entry point, with scripted answers.
"""

import io

import pytest

from label_kmeans.cli import main


def _answers(*values):
    replies = iter(values)

    def _input(prompt: str) -> str:
        return next(replies)

    return _input


@pytest.fixture()
def stream() -> io.StringIO:
    return io.StringIO()


class TestMain:
    def test_runs_to_convergence(self, write_data, stream) -> None:
        path = write_data("0,0,A\n10,10,B\n")

        status = main(input_func=_answers(str(path), "2"), stream=stream)

        output = stream.getvalue()
        assert status == 0
        assert output.count("Sum of distances: 0.0") == 2
        assert "100.00% A" in output
        assert "100.00% B" in output

    def test_missing_file(self, tmp_path, stream) -> None:
        status = main(
            input_func=_answers(str(tmp_path / "nope.csv"), "2"), stream=stream
        )

        assert status == 1
        assert stream.getvalue().startswith("Error!!")
        assert "Sum of distances" not in stream.getvalue()

    def test_malformed_file(self, write_data, stream) -> None:
        path = write_data("1,2,a\nx,2,b\n")
        assert main(input_func=_answers(str(path), "1"), stream=stream) == 1
        assert "Error!!" in stream.getvalue()

    def test_non_integer_k(self, write_data, stream) -> None:
        path = write_data("1,2,a\n")
        assert main(input_func=_answers(str(path), "three"), stream=stream) == 1
        assert "k must be an integer" in stream.getvalue()

    @pytest.mark.parametrize("k", ["0", "5"])
    def test_k_out_of_range(self, write_data, stream, k: str) -> None:
        path = write_data("0,0,A\n10,10,B\n")
        assert main(input_func=_answers(str(path), k), stream=stream) == 1
        assert "Error!!" in stream.getvalue()

    def test_end_of_input(self, stream) -> None:
        def _eof(prompt: str) -> str:
            raise EOFError

        assert main(input_func=_eof, stream=stream) == 1
