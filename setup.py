from setuptools import setup

setup(
    name="geostruct",
    version="0.1.0",
    description="Decode GeoJSON-like records into typed geometry structs",
    license="BSD",
    packages=["geostruct"],
    package_data={"geostruct": ["py.typed"]},
    python_requires=">=3.9",
    install_requires=["msgspec>=0.18"],
    extras_require={
        "yaml": ["pyyaml"],
        "test": ["pytest", "pyyaml"],
    },
)
