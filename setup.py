from setuptools import setup, find_packages
from pathlib import Path

setup(
    name="sigfield_annotation",
    version=Path("./sigfield_annotation/VERSION").read_text().strip(),
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"sigfield_annotation": ["VERSION"]},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "opencv-python-headless",
        "easydict",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "sigfield_annotation=sigfield_annotation.cli:main",
        ],
    },
)
