"""Linear regression walkthrough: OLS, collinearity, ridge and lasso."""

__version__ = "0.1.0"
