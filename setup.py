# setup.py
from setuptools import setup, find_packages

setup(
    name="mosaicfx",
    version="1.0.0",
    description="MosaicFX - chunky sprite-atlas mosaic and pixelation post effects",
    packages=find_packages(include=["mosaicfx", "mosaicfx.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "Pillow>=9.0.0",
        "numba>=0.55.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
