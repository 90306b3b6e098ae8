"""check-conan-info: read version and source data from conandata.yml trees."""

__version__ = "0.1.0"
