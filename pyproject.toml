[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "embebidos"
version = "0.1.0"
description = "Sensor data collection from an Arduino over serial, plus small analysis tools: genetic optimisation, ARIMA forecasting, data imputation, satisfaction scores and charts."
requires-python = ">=3.10"
keywords = [
    "arduino",
    "serial",
    "sensor",
    "genetic-algorithm",
    "arima",
    "forecasting",
    "boxplot",
    "imputation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "numpy",
    "matplotlib",
    "pyserial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
embebidos-boxplot = "embebidos.graphics.box_plot:main"
embebidos-analysis = "embebidos.analysis_cli:main"
embebidos-collect = "embebidos.arduino.commands:collect_main"
embebidos-record = "embebidos.arduino.commands:record_main"

[tool.hatch.build.targets.wheel]
packages = ["embebidos"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
