#!/usr/bin/env python3
"""
Sweep every R x S shape up to --max-n through the five-phase column sort and
plot which shapes always come out fully sorted.

Requires the project to be installed (pip install -e .).

Output: docs/img/shape_sweep.svg
"""

import argparse
from pathlib import Path

from sequential_columnsort import sweep_shapes

COLORS = {
    "always sorted": "#2ca02c",
    "sometimes unsorted": "#d62728",
}


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Column sort shape sweep chart")
    parser.add_argument("--max-n", type=int, default=64, help="Largest element count to sweep.")
    parser.add_argument("--trials", type=int, default=20, help="Random inputs per shape.")
    parser.add_argument("--seed", type=int, default=0, help="Random seed for reproducibility.")
    parser.add_argument("--out", type=Path, default=Path("docs/img/shape_sweep.svg"))
    args = parser.parse_args(argv)
    if args.max_n < 1:
        parser.error("--max-n must be at least 1")
    if args.trials < 0:
        parser.error("--trials must not be negative")
    return args


def main(argv=None) -> None:
    args = parse_args(argv)
    results = sweep_shapes(args.max_n, trials=args.trials, seed=args.seed)

    s_max = max(r.cols for r in results)
    r_max = max(r.rows for r in results)

    width, height = 900, 560
    margin_left, margin_bottom, margin_top, margin_right = 120, 80, 60, 40

    def scale_x(s: float) -> float:
        return margin_left + (s - 1) / max(s_max - 1, 1) * (width - margin_left - margin_right)

    def scale_y(r: float) -> float:
        return height - margin_bottom - (r - 1) / max(r_max - 1, 1) * (height - margin_bottom - margin_top)

    parts = []
    parts.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}" viewBox="0 0 {width} {height}">')
    parts.append('<style>text { font-family: sans-serif; font-size: 13px; }</style>')

    # Axes
    x0, y0 = margin_left, height - margin_bottom
    x1, y1 = width - margin_right, height - margin_bottom
    parts.append(f'<line x1="{x0}" y1="{y0}" x2="{x1}" y2="{y1}" stroke="black" stroke-width="1.5" />')
    parts.append(f'<line x1="{x0}" y1="{margin_top}" x2="{x0}" y2="{y0}" stroke="black" stroke-width="1.5" />')

    # X ticks (columns)
    for s in range(1, s_max + 1, max(1, s_max // 16)):
        x = scale_x(s)
        parts.append(f'<line x1="{x}" y1="{y0}" x2="{x}" y2="{y0 + 6}" stroke="black" />')
        parts.append(f'<text x="{x}" y="{y0 + 24}" text-anchor="middle">{s}</text>')

    # Y ticks (rows)
    for r in range(1, r_max + 1, max(1, r_max // 16)):
        y = scale_y(r)
        parts.append(f'<line x1="{x0 - 6}" y1="{y}" x2="{x0}" y2="{y}" stroke="black" />')
        parts.append(f'<text x="{x0 - 10}" y="{y + 4}" text-anchor="end">{r}</text>')

    parts.append(f'<text x="{width/2}" y="{margin_top - 20}" text-anchor="middle" font-size="18">Column sort without shifts: fully sorted shapes (n ≤ {args.max_n})</text>')
    parts.append(f'<text x="{(x0 + x1)/2}" y="{height - 20}" text-anchor="middle">Columns (S)</text>')
    parts.append(f'<text x="25" y="{(margin_top + y0)/2}" text-anchor="middle" transform="rotate(-90 25 {(margin_top + y0)/2})">Rows (R)</text>')

    # Filled markers satisfy the (R, S) constraints, hollow ones do not
    for res in results:
        color = COLORS["always sorted" if res.always_sorted else "sometimes unsorted"]
        fill = color if res.valid else "white"
        parts.append(
            f'<circle cx="{scale_x(res.cols):.2f}" cy="{scale_y(res.rows):.2f}" r="4" fill="{fill}" stroke="{color}" stroke-width="1.5">'
            f'<title>{res.rows}x{res.cols}: {res.sorted_trials}/{res.trials} sorted, valid={res.valid}</title></circle>'
        )

    # Legend
    legend_x, legend_y = width - margin_right - 200, margin_top + 10
    line_height = 22
    parts.append(f'<rect x="{legend_x - 10}" y="{legend_y - 14}" width="180" height="{len(COLORS)*line_height + 10}" fill="#f8f8f8" stroke="#ccc" />')
    for i, (name, color) in enumerate(COLORS.items()):
        y = legend_y + i * line_height
        parts.append(f'<circle cx="{legend_x + 12}" cy="{y}" r="4" fill="{color}" stroke="white" stroke-width="1.5" />')
        parts.append(f'<text x="{legend_x + 36}" y="{y + 5}" >{name}</text>')

    parts.append("</svg>")

    unsorted = [r for r in results if r.valid and not r.always_sorted]
    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text("\n".join(parts))
    print(f"Wrote {args.out}: {len(results)} shapes, {len(unsorted)} valid shapes not always sorted.")
    for r in unsorted:
        print(f"  R={r.rows:>3} S={r.cols:>3}  {r.sorted_trials}/{r.trials} sorted")


if __name__ == "__main__":
    main()
