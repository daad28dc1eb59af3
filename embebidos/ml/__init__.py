"""Genetic optimisation, ARIMA forecasting, imputation and satisfaction scores."""