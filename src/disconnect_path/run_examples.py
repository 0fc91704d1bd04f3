from src.disconnect_path.cut_cells import analyze_cut
from src.disconnect_path.cut_check import is_possible_to_cut_path
from src.disconnect_path.grid import LandGrid


SAMPLES = {
    "single cell": [[1]],
    "one path": [[1, 1], [0, 1]],
    "full 3x3": [[1, 1, 1], [1, 1, 1], [1, 1, 1]],
    "blocked": [[1, 0], [0, 1]],
    "bottleneck": [
        [1, 1, 1, 0],
        [1, 0, 1, 0],
        [1, 1, 1, 1],
        [0, 0, 1, 1],
    ],
}


def main():
    results = {}
    for name, rows in SAMPLES.items():
        land = LandGrid.from_rows(rows)
        report = analyze_cut(land)
        before = land.count_land()
        possible = is_possible_to_cut_path(land)
        results[name] = possible
        print(f"{name}: cuttable={possible} path={report.has_path} cut_cells={report.cut_cells}",
              "land=", before, "->", land.count_land())
    return results


if __name__ == "__main__":
    main()
