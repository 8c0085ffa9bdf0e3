# scalargrad/data/__init__.py

from .moons import read_csv_file, make_moons, load_moons_data

__all__ = ["read_csv_file", "make_moons", "load_moons_data"]
