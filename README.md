# embebidos

Tools for collecting temperature and humidity readings from an Arduino over
a serial line, and for analysing numeric data: a small genetic optimiser,
an ARIMA forecaster, data imputation helpers, a satisfaction score, random
sample generators and charts drawn with matplotlib.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `embebidos-collect [--baud N] [--debug]` | Looks for the Arduino by its USB vendor/product id (0x1a86 / 0x7523), reads lines (9600 baud by default), splits each on `-` and reports how many rows were collected. `--debug` echoes each received line. |
| `embebidos-record [--output PATH] [--baud N] [--wait SECONDS]` | Finds the same Arduino, waits (10 seconds by default) for it to settle, then writes every line with exactly three comma-separated fields to a CSV file (`sensor_data.csv` by default) under a `Timestamp,Temperature,Humidity` header. |
| `embebidos-boxplot [OUTPUT]` | Draws an example temperature box plot and saves it (to `boxplot.png` by default). |
| `embebidos-analysis [--seed N] [--count N]` | Generates random readings between 10 and 40 (100 by default) and prints satisfaction scores for the values 24, 40 and 90 against their range. |

If no matching device is attached, the serial commands say so and stop.

## Library use

Data imputation (`embebidos.ml.data_imputation`):

```python
from embebidos.ml.data_imputation import linear_interpolation, median, simple_exponential_smoothing

linear_interpolation([1.0, 2.0, 5.0, 10.0, 20.0], 2)       # 5.0
simple_exponential_smoothing([1.0, 3.0, 5.0], 0.5)         # [1.0, 2.0, 3.5]
median([1.0, 5.0, 3.0, 7.0, 9.0, 2.0, 4.0, 8.0], 4)        # [4.0, 6.0]
```

Fitness and selection for the genetic algorithm (lower sum of squares is
better):

```python
from embebidos.ml.selection import calculate_fitness, environmental_selection

calculate_fitness([1.0, 2.0, 3.0])                          # 14.0
environmental_selection(0.5, [[3.0, 4.0], [1.0, 1.0], [2.0, 2.0], [5.0, 5.0]])
# {2.0: [1.0, 1.0], 8.0: [2.0, 2.0]}
```

`embebidos.ml.tournament.binary_tournament` picks parents by two-way
tournaments, and `embebidos.ml.crossover_mutation` provides `crossover` and
`mutation`. `embebidos.ml.genetic_optimizer.GeneticOptimizer` ties them
together; `step()` runs one generation and returns its best fitness,
`optimize(max_generations, target_fitness=None)` runs many and stops early
once the target is reached, and `population` gives a copy of the current
individuals. Every random function accepts an optional `random.Random`
for reproducible runs.

ARIMA forecasting (`embebidos.ml.arima`):

```python
from embebidos.ml.arima import Arima

series = [100.0, 105.0, 110.0, 112.0, 115.0, 120.0, 125.0, 130.0]
model = Arima(1, 1, 1)
model.fit(series)
model.forecast(series, 3)
```

`fit` raises `ArimaError` when the series is too short for the chosen
orders, when the MA order exceeds the AR order, or when the least-squares
system cannot be solved; `forecast` raises it when the model has not been
fitted. `embebidos.ml.demos` has `run_arima_demo()` and
`run_genetic_demo()`, which print example runs.

Satisfaction scores (`embebidos.ml.satisfaction`):

```python
from embebidos.ml.satisfaction import Mode, satisfaction

satisfaction(25.0, 10.0, 40.0, Mode.MAXIMIZATION)           # 0.25
```

`Mode` accepts `"minimizacion"` and `"maximizacion"`; an empty or reversed
range or an unknown mode raises `ValueError`.

Random samples (`embebidos.random_data`): `random_floats` (rounded to two
decimals), `random_ints` and `random_matrix`.

Charts (`embebidos.graphics`): `BoxplotData` computes quartiles, whiskers
and outliers for a labelled set of values and `statistics()` returns them
as `BoxplotStatistics`; `create_boxplot` draws several of them and
`line_example` saves a sample two-line chart (`boxplot_data`).
`boxplotting` draws a single box from `TemperatureQuartiles` (`box_plot`),
and `line_chart` draws an x/y line chart with markers (`line_chart`).

Serial helpers (`embebidos.arduino`): `find_arduino_port` in `port`,
`parse_line`, `read_signals` and `receive_signals` in `connection`, and
`write_sensor_data` in `csv_handler`, which take any object with a
`readline()` method, such as an open serial port.

`embebidos.display` formats and prints tournament results and mappings
for debugging.

## What it does not do

Readings are collected and recorded as they arrive; the package does not
plot or analyse the recorded CSV file on its own, and it keeps no store of
readings beyond that file.