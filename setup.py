from setuptools import setup

setup(
    name="seekbuf",
    version="1.0.0",
    author="Kashif Razzaqui",
    author_email="kashif.razzaqui@gmail.com",
    description=(
        "An in-memory byte buffer with a single cursor for positioned reads, positioned writes and seeking. "
        "Behaves like a random-access binary file backed by memory."
    ),
    packages=["seekbuf"],
    python_requires=">=3.8",
    extras_require={"test": ["pytest>=7.0"]},
)
