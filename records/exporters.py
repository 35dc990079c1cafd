"""Serialize weather records as JSON, CSV or XML documents."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any
from xml.etree import ElementTree as ET

from django.core.serializers.json import DjangoJSONEncoder
from django.utils import timezone

ExportRow = Mapping[str, Any]

RECORD_HEADERS: tuple[str, ...] = (
    "ID",
    "Location",
    "Latitude",
    "Longitude",
    "Start Date",
    "End Date",
    "Current Temperature (°C)",
    "Min Temperature (°C)",
    "Max Temperature (°C)",
    "Feels Like (°C)",
    "Humidity (%)",
    "Pressure (mb)",
    "Wind Speed (m/s)",
    "Wind Direction (°)",
    "Description",
    "Icon",
    "Is Historical",
    "Created At",
    "Updated At",
)

FORECAST_HEADERS: tuple[str, ...] = (
    "Record ID",
    "Location",
    "Date",
    "Min Temperature (°C)",
    "Max Temperature (°C)",
    "Description",
    "Icon",
)

DAILY_HEADERS: tuple[str, ...] = (
    "Record ID",
    "Location",
    "Date",
    "Current Temperature (°C)",
    "Min Temperature (°C)",
    "Max Temperature (°C)",
    "Feels Like (°C)",
    "Humidity (%)",
    "Pressure (mb)",
    "Wind Speed (m/s)",
    "Wind Direction (°)",
    "Description",
    "Icon",
)


def _day_part(value: Any) -> str:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value or "").split("T", 1)[0]


def export_json(rows: Sequence[ExportRow]) -> str:
    return json.dumps(list(rows), indent=2, cls=DjangoJSONEncoder)


def export_csv(rows: Sequence[ExportRow]) -> str:
    """Records first, then forecast and daily sections when present."""

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(RECORD_HEADERS)
    for row in rows:
        writer.writerow(
            [
                row["id"],
                row["location"],
                row["latitude"],
                row["longitude"],
                _day_part(row["start_date"]),
                _day_part(row["end_date"]),
                row["temperature"],
                row["temperature_min"],
                row["temperature_max"],
                row["feels_like"],
                row["humidity"],
                row["pressure"],
                row["wind_speed"],
                row["wind_direction"],
                row["description"],
                row["icon"],
                "true" if row["is_historical"] else "false",
                _day_part(row["created_at"]),
                _day_part(row["updated_at"]),
            ]
        )

    if any(row.get("forecast") for row in rows):
        buffer.write("\n\n--- FORECAST DATA ---\n")
        writer.writerow(FORECAST_HEADERS)
        for row in rows:
            for day in row.get("forecast") or []:
                writer.writerow(
                    [
                        row["id"],
                        row["location"],
                        _day_part(day.get("date")),
                        day.get("t_min"),
                        day.get("t_max"),
                        day.get("description"),
                        day.get("icon"),
                    ]
                )

    if any(row.get("daily_data") for row in rows):
        buffer.write("\n\n--- DAILY HISTORICAL DATA ---\n")
        writer.writerow(DAILY_HEADERS)
        for row in rows:
            for day in row.get("daily_data") or []:
                writer.writerow(
                    [
                        row["id"],
                        row["location"],
                        _day_part(day.get("date")),
                        day.get("temperature"),
                        day.get("t_min"),
                        day.get("t_max"),
                        day.get("feels_like"),
                        day.get("humidity"),
                        day.get("pressure"),
                        day.get("wind_speed"),
                        day.get("wind_direction"),
                        day.get("description"),
                        day.get("icon"),
                    ]
                )
    return buffer.getvalue()


def _text(parent: ET.Element, tag: str, value: Any) -> ET.Element:
    element = ET.SubElement(parent, tag)
    if isinstance(value, bool):
        element.text = "true" if value else "false"
    elif value is not None:
        element.text = str(value)
    return element


def export_xml(
    rows: Sequence[ExportRow], *, exported_at: datetime | None = None
) -> str:
    root = ET.Element("weather-records")
    info = ET.SubElement(root, "export-info")
    _text(info, "export-date", (exported_at or timezone.now()).isoformat())
    _text(info, "total-records", len(rows))

    for row in rows:
        record = ET.SubElement(root, "record", id=str(row["id"]))
        location = ET.SubElement(record, "location")
        _text(location, "name", row["location"])
        _text(location, "latitude", row["latitude"])
        _text(location, "longitude", row["longitude"])

        date_range = ET.SubElement(record, "date-range")
        _text(date_range, "start", _day_part(row["start_date"]))
        _text(date_range, "end", _day_part(row["end_date"]))

        temps = ET.SubElement(record, "temperature-data")
        _text(temps, "current", row["temperature"])
        _text(temps, "min", row["temperature_min"])
        _text(temps, "max", row["temperature_max"])
        _text(temps, "feels-like", row["feels_like"])
        _text(temps, "humidity", row["humidity"])
        _text(temps, "pressure", row["pressure"])
        _text(temps, "wind-speed", row["wind_speed"])
        _text(temps, "wind-direction", row["wind_direction"])
        _text(temps, "description", row["description"])

        _text(record, "is-historical", bool(row["is_historical"]))
        _text(record, "created-at", row["created_at"])
        _text(record, "updated-at", row["updated_at"])

        forecast = row.get("forecast")
        if forecast:
            forecast_el = ET.SubElement(record, "forecast")
            for day in forecast:
                day_el = ET.SubElement(
                    forecast_el, "day", date=_day_part(day.get("date"))
                )
                temperature = ET.SubElement(day_el, "temperature")
                _text(temperature, "min", day.get("t_min"))
                _text(temperature, "max", day.get("t_max"))
                _text(day_el, "description", day.get("description"))

        daily = row.get("daily_data")
        if daily:
            daily_el = ET.SubElement(record, "daily-data")
            for day in daily:
                day_el = ET.SubElement(
                    daily_el, "day", date=_day_part(day.get("date"))
                )
                temperature = ET.SubElement(day_el, "temperature")
                _text(temperature, "current", day.get("temperature"))
                _text(temperature, "min", day.get("t_min"))
                _text(temperature, "max", day.get("t_max"))
                _text(temperature, "feels-like", day.get("feels_like"))
                _text(day_el, "humidity", day.get("humidity"))
                _text(day_el, "pressure", day.get("pressure"))
                _text(day_el, "wind-speed", day.get("wind_speed"))
                _text(day_el, "wind-direction", day.get("wind_direction"))
                _text(day_el, "description", day.get("description"))

    ET.indent(root)
    body = ET.tostring(root, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'


@dataclass(frozen=True)
class ExportFormat:
    extension: str
    content_type: str
    render: Callable[[Sequence[ExportRow]], str]


EXPORT_FORMATS: dict[str, ExportFormat] = {
    "json": ExportFormat("json", "application/json", export_json),
    "csv": ExportFormat("csv", "text/csv; charset=utf-8", export_csv),
    "xml": ExportFormat("xml", "application/xml", export_xml),
}


def export_filename(fmt: str, today: date | None = None) -> str:
    day = today or timezone.localdate()
    return f"weather-history-{day.isoformat()}.{EXPORT_FORMATS[fmt].extension}"
