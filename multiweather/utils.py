KELVIN_OFFSET = 273.15


def kelvin_to_celsius(kelvin: float) -> float:
    return kelvin - KELVIN_OFFSET


def fmt_duration(seconds: float) -> str:
    """Compact human-readable duration (e.g., 850µs, 12.4ms, 1.52s)."""
    value = max(seconds, 0.0) * 1e9
    for unit in ["ns", "µs", "ms"]:
        if value < 1000.0:
            return f"{value:.4g}{unit}"
        value /= 1000.0
    return f"{value:.2f}s"
