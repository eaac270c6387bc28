# main.py
import sys

from gps_graph.app.build import build
from gps_graph.domain.distance import EDGE_WEIGHT, GREAT_CIRCLE


def run(path: str, k: int = 3, seed: int = 0):
    app = build({"session": {"seed": seed}})
    nav = app.navigator
    nav.load_file(path)

    here = nav.current()
    print(f"current: #{here.location.id} {here.location.name}, {here.location.region}")
    for mode in (GREAT_CIRCLE, EDGE_WEIGHT):
        for i, nb in enumerate(nav.k_nearest(k, mode), start=1):
            print(f"  [{mode}] #{i}: {nb.location.name}, {nb.location.region} ({int(nb.distance)})")
    return app


if __name__ == "__main__":
    run(sys.argv[1], *(int(a) for a in sys.argv[2:3]))
