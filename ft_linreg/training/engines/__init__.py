"""
Training Engines (FINAL / FROZEN)

Engines hold the numeric semantics; steps only orchestrate.

- normalize_engine              joint max-abs / min-max scaling + inverse
- error_metric                  mean squared error
- gradient_engine               forward finite-difference gradient
- gradient_descent_train_engine optimization loop + stopping policies
- dataset_load_engine           two-column CSV -> SampleSeries

Do NOT perform file I/O outside dataset_load_engine.
"""
