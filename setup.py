"""
setup.py

Установка Klotski Solver.

Использование:
    pip install -e .            # решатель и веб-интерфейс
    pip install -e .[test]      # + pytest
"""

from setuptools import setup, find_packages

setup(
    name="klotski_solver",
    version="1.0.0",
    description="Klotski sliding-block puzzle solver",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    package_data={"web": ["templates/*.html"]},
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "flask>=2.0",
        "markupsafe>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "klotski=main:main",
        ],
    },
    zip_safe=False,
)
