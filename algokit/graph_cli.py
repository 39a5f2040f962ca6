"""Interactive menu that builds a graph from a file and queries it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from enum import IntEnum
from typing import TextIO

from algokit.graph import (
    Graph,
    build_graph,
    connected_components,
    dijkstra,
    format_adjacency,
    format_parents,
    is_connected,
    prim,
    spanning_tree,
)


class Option(IntEnum):
    INPUT_FROM_FILE = 1
    SHOW_GRAPH = 2
    SHOW_CONNECTED_COMPONENTS = 3
    CONNECTED_CHECK = 4
    SHOW_SPANNING_TREE = 5
    DIJKSTRA = 6
    PRIM = 7
    EXIT_PROGRAM = 8


_MENU = (
    "Menu':\n"
    f"{Option.INPUT_FROM_FILE.value}: Costruzione grafo da file.\n"
    f"{Option.SHOW_GRAPH.value}: Stampa le liste di adiacenza.\n"
    f"{Option.SHOW_CONNECTED_COMPONENTS.value}: Stampa le componenti connesse.\n"
    f"{Option.CONNECTED_CHECK.value}: Controlla se il grafo e' connesso.\n"
    f"{Option.SHOW_SPANNING_TREE.value}: Stampa l'albero di copertura.\n"
    f"{Option.DIJKSTRA.value}: Stampa l'albero dei cammini minimi con Dijkistra.\n"
    f"{Option.PRIM.value}: Stampa il Minimum Spanning Tree con Prim.\n"
    f"{Option.EXIT_PROGRAM.value}: Esci dal programma.\n"
    "--> "
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _error(message: str) -> None:
    print(message, file=sys.stderr)


def _read_source(graph: Graph, tokens: Iterator[str]) -> int | None:
    print(f"Inserisci una sorgente da 1 a {graph.dim}: ", end="")
    token = next(tokens, None)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        _error("Sorgente non valida.")
        return None


def _print_description(directed: bool, weighted: bool) -> None:
    print("Hai creato un grafo ", end="")
    if not directed:
        print("non ", end="")
    print("orientato e ", end="")
    if not weighted:
        print("non ", end="")
    print("pesato.")


def _query(option: Option, graph: Graph, tokens: Iterator[str]) -> None:
    match option:
        case Option.SHOW_GRAPH:
            print("Grafo:")
            print(format_adjacency(graph), end="")
        case Option.SHOW_CONNECTED_COMPONENTS:
            print("Componenti connesse:")
            for component in connected_components(graph):
                print("".join(f"{node} " for node in component))
        case Option.CONNECTED_CHECK:
            if is_connected(graph):
                print("Il grafo e' connesso.")
            else:
                print("Il grafo non e' connesso.")
        case Option.SHOW_SPANNING_TREE:
            if not is_connected(graph):
                _error("Il grafo non e' connesso e quindi non ha un albero di copertura.")
                return
            src = _read_source(graph, tokens)
            if src is None:
                return
            try:
                parents = spanning_tree(graph, src)
            except ValueError:
                return
            print(f"Spanning Tree del nodo {src}:")
            print(format_parents(parents), end="")
        case Option.DIJKSTRA:
            src = _read_source(graph, tokens)
            if src is None:
                return
            parents = dijkstra(graph, src)
            print(f"Albero dei cammini minimi del grafo radicato in {src}:")
            print(format_parents(parents), end="")
        case Option.PRIM:
            src = _read_source(graph, tokens)
            if src is None:
                return
            parents = prim(graph, src)
            print(f"Minimum Spanning Tree radicato in {src}:")
            print(format_parents(parents), end="")


def _run(f_in: TextIO, directed: bool, weighted: bool, tokens: Iterator[str]) -> int:
    graph: Graph | None = None
    while True:
        print(_MENU, end="")
        token = next(tokens, None)
        if token is None:
            print()
            return 0
        try:
            option = Option(int(token))
        except ValueError:
            _error("Opzione non disponibile. Scegline un altro.")
            continue

        if option is Option.EXIT_PROGRAM:
            print("Esco dal programma...")
            return 0
        if option is Option.INPUT_FROM_FILE:
            if f_in.closed:
                _error(
                    "Lo stream del file e' stato chiuso e quindi non puoi effettuare l'input."
                )
                continue
            print("Creo il grafo...")
            try:
                graph = build_graph(f_in, directed, weighted)
            except (ValueError, IndexError) as error:
                _error(f"Errore nel file: {error}")
                continue
            finally:
                f_in.close()
            _print_description(directed, weighted)
            continue
        if graph is None:
            _error("Il grafo non e' stato ancora costruito.")
            continue
        try:
            _query(option, graph, tokens)
        except IndexError as error:
            _error(f"Sorgente non valida: {error}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build a graph from a file and explore it.")
    parser.add_argument("path", help="file with the node count and the arcs")
    parser.add_argument("directed", type=int, help="1 for a directed graph, 0 otherwise")
    parser.add_argument("weighted", type=int, help="1 if arcs carry weights, 0 otherwise")
    args = parser.parse_args(argv)

    try:
        f_in = open(args.path, encoding="utf-8")
    except OSError:
        _error("Errore durante l'apertura del file.")
        return 2

    with f_in:
        return _run(f_in, bool(args.directed), bool(args.weighted), _tokens(sys.stdin))


if __name__ == "__main__":
    raise SystemExit(main())