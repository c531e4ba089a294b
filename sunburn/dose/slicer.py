"""Split an hourly UV forecast into fixed sub-hour windows."""

from collections.abc import Iterator, Sequence
from datetime import timedelta

from sunburn.models.calculation import SliceWindow
from sunburn.models.forecast import HourlyForecastPoint


def iter_slices(
    forecast: Sequence[HourlyForecastPoint], slices_per_hour: int
) -> Iterator[SliceWindow]:
    """Lazily yield windows spanning every consecutive pair of hourly samples.

    UV at each window's start and end is linearly interpolated between the
    two bounding samples. Fewer than two samples yields nothing.
    """
    if slices_per_hour < 1:
        raise ValueError(f"slices_per_hour must be >= 1, got {slices_per_hour}")
    if len(forecast) < 2:
        return

    width = timedelta(hours=1) / slices_per_hour
    for i in range(len(forecast) - 1):
        h0, h1 = forecast[i], forecast[i + 1]
        for j in range(slices_per_hour):
            a0 = j / slices_per_hour
            a1 = (j + 1) / slices_per_hour
            yield SliceWindow(
                start=h0.timestamp + width * j,
                end=h0.timestamp + width * (j + 1),
                uvi_start=h0.uv_index * (1 - a0) + h1.uv_index * a0,
                uvi_end=h0.uv_index * (1 - a1) + h1.uv_index * a1,
            )


def build_slices(
    forecast: Sequence[HourlyForecastPoint], slices_per_hour: int
) -> list[SliceWindow]:
    return list(iter_slices(forecast, slices_per_hour))
