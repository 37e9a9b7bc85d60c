"""
Daily ET0 Pipeline

Computes daily reference evapotranspiration (FAO-56 Penman-Monteith) from
hourly telemetry, records it in a spreadsheet ledger and pushes it back to
the telemetry service.
"""

__version__ = "1.0.0"
