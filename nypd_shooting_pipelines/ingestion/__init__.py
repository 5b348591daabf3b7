from .shooting_ingest import fetch_shootings_csv, load_shootings

__all__ = ["fetch_shootings_csv", "load_shootings"]
