"""
Bootcamp API root package.

This package contains the FastAPI app entry point (main.py), API routes,
use cases, domain models and infrastructure (MongoDB, geocoding, photo
storage) for a directory of coding bootcamps.
"""
