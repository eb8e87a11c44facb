import pytest

from kmeans2d.cli import EXIT_INPUT, EXIT_OK, EXIT_OUTPUT, build_parser, main
from kmeans2d.io import read_records


def test_run_prints_and_saves(example_file, tmp_path, capsys):
    out = tmp_path / 'result.txt'
    assert main(['run', str(example_file), '-k', '2', '-o', str(out)]) == EXIT_OK
    stdout = capsys.readouterr().out
    assert 'Index: 3\t| X: 10\t| Y: 10\t| Cluster ID: 2' in stdout
    assert '|        4 |  11.00 |  10.00 |          2 |' in out.read_text()


def test_run_without_output(example_file, capsys):
    assert main(['run', str(example_file), '-k', '1']) == EXIT_OK
    assert 'Cluster ID: 1' in capsys.readouterr().out


def test_k_too_large(example_file, capsys):
    assert main(['run', str(example_file), '-k', '9']) == EXIT_INPUT
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'exceeds' in captured.err


def test_non_positive_k(example_file):
    assert main(['run', str(example_file), '-k', '0']) == EXIT_INPUT


def test_missing_input(tmp_path, capsys):
    assert main(['run', str(tmp_path / 'none.txt'), '-k', '2']) == EXIT_INPUT
    assert 'File not found' in capsys.readouterr().err


def test_unwritable_output_still_reports(example_file, tmp_path, capsys):
    out = tmp_path / 'missing' / 'result.txt'
    assert main(['run', str(example_file), '-k', '2', '-o', str(out)]) == EXIT_OUTPUT
    captured = capsys.readouterr()
    assert 'K-Means clustering result calculated successfully!' in captured.out
    assert 'Unable to open file' in captured.err


def test_strict_flag(tmp_path):
    path = tmp_path / 'points.txt'
    path.write_text('1 0 0\n2 1 1\noops\n')
    assert main(['run', str(path), '-k', '2']) == EXIT_OK
    assert main(['run', str(path), '-k', '2', '--strict']) == EXIT_INPUT


def test_log_file(example_file, tmp_path):
    log = tmp_path / 'run.log'
    assert main(['-v', '--log-file', str(log), 'run', str(example_file), '-k', '2']) == EXIT_OK
    assert 'Converged after 3 iterations' in log.read_text()


def test_gen(tmp_path):
    path = tmp_path / 'blobs.txt'
    assert main(['gen', '50', '3', str(path), '--seed', '1']) == EXIT_OK
    records = read_records(str(path))
    assert len(records) == 50
    assert [r[0] for r in records] == list(range(1, 51))


def test_plot(example_file, tmp_path):
    result = tmp_path / 'result.txt'
    image = tmp_path / 'plot.png'
    assert main(['run', str(example_file), '-k', '2', '-o', str(result)]) == EXIT_OK
    assert main(['plot', str(example_file), str(result), '--save', str(image)]) == EXIT_OK
    assert image.stat().st_size > 0


def test_baseline(tmp_path, capsys):
    path = tmp_path / 'blobs.txt'
    main(['gen', '90', '3', str(path), '--seed', '3'])
    capsys.readouterr()
    assert main(['baseline', str(path), '-k', '3']) == EXIT_OK
    stdout = capsys.readouterr().out
    assert stdout.startswith('kmeans2d ')
    assert 'sklearn' in stdout and 'scipy' in stdout


def test_command_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_run_with_huge_coordinates(tmp_path, capsys):
    path = tmp_path / 'points.txt'
    path.write_text('1 1e200 0\n2 0 0\n3 1 1\n')
    assert main(['run', str(path), '-k', '2']) == EXIT_OK
    assert 'Index: 3\t| X: 1\t| Y: 1\t| Cluster ID: 2' in capsys.readouterr().out
