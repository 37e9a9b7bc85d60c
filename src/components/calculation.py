"""
FAO-56 Penman-Monteith reference evapotranspiration (daily time step).

Inputs are the daily aggregates in sensor units: temperature in C, relative
humidity in %, wind speed in km/h and mean solar radiation in W/m2.

Incoming radiation is converted with a flat factor (mean W/m2 * 0.0864 gives
MJ/m2/day) and used directly as the radiation term; no albedo, net longwave
or soil heat flux terms are applied.
"""

import math
from datetime import date

from src.components.base import CalculationComponent
from src.config import PipelineConfig
from src.models import DailyAggregate, Et0Result
from src.utils import get_logger, round2


WM2_TO_MJ_M2_DAY = 0.0864


def saturation_vapor_pressure(t_c: float) -> float:
    """Saturation vapor pressure at air temperature ``t_c`` [kPa]."""
    return 0.6108 * math.exp((17.27 * t_c) / (t_c + 237.3))


def slope_vapor_pressure_curve(t_c: float) -> float:
    """Slope of the saturation vapor pressure curve at ``t_c`` [kPa/C]."""
    return (4098.0 * saturation_vapor_pressure(t_c)) / math.pow(t_c + 237.3, 2)


def atmospheric_pressure(altitude_m: float) -> float:
    """Mean atmospheric pressure at ``altitude_m`` above sea level [kPa]."""
    return 101.3 * math.pow((293.0 - 0.0065 * altitude_m) / 293.0, 5.26)


def psychrometric_constant(pressure_kpa: float) -> float:
    """Psychrometric constant for ``pressure_kpa`` [kPa/C]."""
    return 0.000665 * pressure_kpa


def calculate_et0(
    t_max: float,
    t_min: float,
    humidity_mean: float,
    wind_mean_kmh: float,
    radiation_mean_wm2: float,
    altitude_m: float
) -> float:
    """
    Daily reference evapotranspiration [mm/day], rounded to 2 decimals.

    Args:
        t_max: Maximum air temperature (C)
        t_min: Minimum air temperature (C)
        humidity_mean: Mean relative humidity (%)
        wind_mean_kmh: Mean wind speed at 2 m (km/h)
        radiation_mean_wm2: Mean solar radiation (W/m2)
        altitude_m: Site altitude (m)

    Callers are responsible for physically meaningful inputs; a mean
    temperature of -237.3 C divides by zero.
    """
    u2 = wind_mean_kmh / 3.6
    rs = radiation_mean_wm2 * WM2_TO_MJ_M2_DAY

    t_mean = (t_max + t_min) / 2.0

    es = (saturation_vapor_pressure(t_max) + saturation_vapor_pressure(t_min)) / 2.0
    ea = es * (humidity_mean / 100.0)

    delta = slope_vapor_pressure_curve(t_mean)
    gamma = psychrometric_constant(atmospheric_pressure(altitude_m))

    numerator = 0.408 * delta * rs + gamma * (900.0 / (t_mean + 273.0)) * u2 * (es - ea)
    denominator = delta + gamma * (1.0 + 0.34 * u2)

    return round2(numerator / denominator)


class Et0CalculationComponent(CalculationComponent):
    """Runs the ET0 formula once per day with the configured altitude."""

    def __init__(self, config: PipelineConfig):
        super().__init__(config)
        self.logger = get_logger(__name__)
        self.altitude_m = self.config.calculation.altitude_m

    def execute(self, aggregate: DailyAggregate, target_date: date) -> Et0Result:
        """
        Compute ET0 and round the diagnostic fields.

        Args:
            aggregate: Validated daily aggregates
            target_date: Day the aggregates describe

        Returns:
            Et0Result with every field rounded to 2 decimals
        """
        et0 = calculate_et0(
            aggregate.t_max,
            aggregate.t_min,
            aggregate.humidity_mean,
            aggregate.wind_mean,
            aggregate.radiation_mean,
            self.altitude_m
        )
        self.logger.info(f"Computed ET0 for {target_date.isoformat()} = {et0}")

        return Et0Result(
            date=target_date,
            t_max=round2(aggregate.t_max),
            t_min=round2(aggregate.t_min),
            humidity_mean=round2(aggregate.humidity_mean),
            wind_mean=round2(aggregate.wind_mean),
            radiation_mean=round2(aggregate.radiation_mean),
            et0=et0
        )
