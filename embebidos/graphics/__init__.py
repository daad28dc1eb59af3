"""Box-plot statistics, box plots and line charts."""