#!/usr/bin/env python3
"""
Hex Scenario Loader - Entry Point
═══════════════════════════════════════════════════════════════════════════

Wczytuje scenariusz, waliduje graf kafli i przechodzi przez ekrany gry
(MAIN_MENU -> GAMEPLAY/LOADING_SCREEN -> GAMEPLAY/IN_GAME).

Użycie:
    python main.py                    # Domyślny scenariusz (test_map)
    python main.py island             # Konkretny scenariusz
    python main.py --data other/      # Inny katalog danych
    python main.py --verbose          # Szczegółowy output

Wynik:
    - Wypisuje kafle i stan gry na konsolę
    - Zapisuje log wczytywania do output/load_{scenario}.json
"""

import argparse
import logging
import sys
from pathlib import Path

# Dodaj katalog projektu do path
sys.path.insert(0, str(Path(__file__).parent))

from hexscenario.events.event_logger import LoadEventLogger, LoadEventType
from hexscenario.game.session import GameSession
from hexscenario.scenario.store import ScenarioStore


def main():
    """Główna funkcja."""
    parser = argparse.ArgumentParser(
        description="Hex Scenario Loader",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "scenario",
        nargs="?",
        default="test_map",
        help="Nazwa scenariusza (domyślnie: test_map)"
    )
    parser.add_argument(
        "--data",
        default="data/",
        help="Katalog danych (domyślnie: data/)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Szczegółowy output"
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Nie zapisuj logu do pliku"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print("=" * 60)
    print("HEX SCENARIO LOADER")
    print("=" * 60)
    print(f"Scenariusz: {args.scenario}")
    print()

    store = ScenarioStore(args.data)
    events = LoadEventLogger(scenario=args.scenario)
    session = GameSession(store, events=events)

    print(f"Stan: {session.states.label}")
    graph = session.load_from_file(args.scenario)
    print(f"Stan: {session.states.label}")

    if graph is not None:
        print()
        print("-" * 60)
        print(f"KAFLE ({len(graph.tiles)})")
        print("-" * 60)
        for tile in graph.tiles:
            filled = len(tile.neighbors.connected())
            print(f"  - #{tile.tile_id} {tile.tile_type} @ {tile.coordinates} ({filled} sąsiadów)")
        print(f"Połączenia: {len(graph.connections)}")
        print()

        state = session.check_if_loaded()
        print(f"Stan: {state}")

    # Wyniki
    print()
    print("=" * 60)
    print("WYNIK")
    print("=" * 60)

    if session.is_in_game:
        print("✅ Scenariusz wczytany")
    else:
        failed = events.get_events_by_type(LoadEventType.LOAD_FAILED)
        reason = failed[-1].data.get("error") if failed else "unknown"
        print(f"❌ Błąd wczytywania: {reason}")

    # Zapisz log
    if not args.no_save:
        output_path = f"output/load_{args.scenario}.json"
        events.save(output_path)
        print()
        print(f"📄 Log zapisany: {output_path}")

    # Verbose: pokaż statystyki
    if args.verbose:
        print()
        print("-" * 60)
        print("STATYSTYKI ZDARZEŃ")
        print("-" * 60)

        for event_type in LoadEventType:
            count = len(events.get_events_by_type(event_type))
            if count > 0:
                print(f"  {event_type.name}: {count}")

    return 0 if session.is_in_game else 1


if __name__ == "__main__":
    sys.exit(main())
