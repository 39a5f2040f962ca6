import io

import pytest

from algokit.graph import build_graph, dijkstra, format_adjacency, format_parents
from algokit.graph_cli import main


@pytest.fixture
def graph_file(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("3\n1 2 1\n2 3 1\n1 3 5\n", encoding="utf-8")
    return path


def _run(monkeypatch, argv, stdin_text):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin_text))
    return main(argv)


def test_build_and_check_connected(monkeypatch, capsys, graph_file):
    code = _run(monkeypatch, [str(graph_file), "0", "1"], "1\n4\n8\n")
    out = capsys.readouterr().out
    assert code == 0
    assert "Hai creato un grafo non orientato e pesato." in out
    assert "Il grafo e' connesso." in out
    assert "Esco dal programma..." in out


def test_show_graph_matches_adjacency(monkeypatch, capsys, graph_file):
    code = _run(monkeypatch, [str(graph_file), "1", "1"], "1\n2\n8\n")
    out = capsys.readouterr().out
    with open(graph_file, encoding="utf-8") as stream:
        expected = format_adjacency(build_graph(stream, True, True))
    assert code == 0
    assert "Grafo:\n" + expected in out


def test_dijkstra_option_prints_parents(monkeypatch, capsys, graph_file):
    code = _run(monkeypatch, [str(graph_file), "0", "1"], "1\n6\n1\n8\n")
    out = capsys.readouterr().out
    with open(graph_file, encoding="utf-8") as stream:
        parents = dijkstra(build_graph(stream, False, True), 1)
    assert code == 0
    assert "Albero dei cammini minimi del grafo radicato in 1:\n" + format_parents(parents) in out
    assert "Il padre del nodo 3 e' il nodo 2" in out


def test_second_build_is_refused(monkeypatch, capsys, graph_file):
    code = _run(monkeypatch, [str(graph_file), "0", "0"], "1\n1\n8\n")
    err = capsys.readouterr().err
    assert code == 0
    assert "Lo stream del file e' stato chiuso" in err


def test_query_before_build_is_refused(monkeypatch, capsys, graph_file):
    code = _run(monkeypatch, [str(graph_file), "0", "0"], "4\n8\n")
    captured = capsys.readouterr()
    assert code == 0
    assert "Il grafo e' connesso." not in captured.out
    assert "non e' stato ancora costruito" in captured.err


def test_unknown_option(monkeypatch, capsys, graph_file):
    code = _run(monkeypatch, [str(graph_file), "0", "0"], "42\nabc\n8\n")
    err = capsys.readouterr().err
    assert code == 0
    assert err.count("Opzione non disponibile. Scegline un altro.") == 2


def test_missing_file(monkeypatch, capsys, tmp_path):
    code = _run(monkeypatch, [str(tmp_path / "absent.txt"), "0", "0"], "")
    assert code == 2
    assert "Errore durante l'apertura del file." in capsys.readouterr().err


def test_wrong_argument_count(monkeypatch, graph_file):
    with pytest.raises(SystemExit) as excinfo:
        _run(monkeypatch, [str(graph_file)], "")
    assert excinfo.value.code == 2


def test_end_of_input_exits_cleanly(monkeypatch, capsys, graph_file):
    code = _run(monkeypatch, [str(graph_file), "0", "0"], "1\n")
    out = capsys.readouterr().out
    assert code == 0
    assert out.count("Menu':") == 2