"""Finding the Arduino, reading its serial output and recording it to CSV."""