from pathlib import Path

SAMPLE_DATA_DIR = Path(__file__).parent / "sample_data"


def get_sample_data_path(filename: str) -> Path:
    """Return the path of a file under tests/sample_data, failing early if it is missing."""
    path = SAMPLE_DATA_DIR / filename
    if not path.exists():
        raise FileNotFoundError(f"Sample data file not found: {path}")
    return path
