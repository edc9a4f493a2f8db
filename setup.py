from pathlib import Path

from setuptools import setup, find_packages


def _read_version():
    """Run ikilog/_version.py without importing the package."""
    namespace = {}
    path = Path(__file__).parent / "src" / "ikilog" / "_version.py"
    exec(path.read_text(encoding="utf-8"), namespace)
    return namespace["PIP_VERSION"]


setup(
    name="iki-logger",
    version=_read_version(),
    description="DLog-style tagged debug logging with emoji color tags, "
                "date-based suppression and an optional crash-reporting sink",
    author="ikiApps LLC",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0", "pytest-cov"],
    },
    entry_points={
        "console_scripts": [
            "ikilog=ikilog.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Logging",
    ],
    python_requires=">=3.10",
)
