"""Example script that draws a smooth wave through the HTTP API."""
from __future__ import annotations

import requests

BASE = "http://localhost:8000/api"


def build_wave(count: int = 6, spacing: float = 100.0, amplitude: float = 60.0) -> None:
    requests.delete(f"{BASE}/drawing", timeout=5).raise_for_status()
    for i in range(count):
        x = 50.0 + i * spacing
        y = 300.0 + (amplitude if i % 2 else -amplitude)
        # dragging out the handle horizontally makes every point smooth
        payload = {"start": [x, y], "end": [x + spacing / 3.0, y]}
        requests.post(f"{BASE}/anchors", json=payload, timeout=5).raise_for_status()


def main() -> None:
    build_wave()
    res = requests.get(f"{BASE}/code", params={"dialect": "python"}, timeout=5)
    res.raise_for_status()
    print(res.text)


if __name__ == "__main__":
    main()
