import matplotlib

# Charts are only ever written to files; never require a display.
matplotlib.use("Agg")
