"""
Training Doctrine

One training run fits y = a * x + b on a single, finite, two-column dataset.

------------------------------------------------------------
Order of operations (FROZEN)
------------------------------------------------------------

1. Load      CSV -> SampleSeries (validated, read-only)
2. Normalize SampleSeries -> normalized SampleSeries + NormalizationState
3. Train     gradient descent on the normalized series only
4. Report    denormalized model -> equation text, scatter + line plot

Any failure in 1-2 aborts the run before (a, b) is ever touched.
Reports never modify the model.

------------------------------------------------------------
Stopping policies
------------------------------------------------------------

FixedEpochs(n)
- exactly n updates, default learning rate 0.001

ConvergenceThreshold(d_rms, max_iterations=None)
- stop once prev_error - error < d_rms, default learning rate 0.01
- an error increase also stops the loop (reported as "diverged")
- without max_iterations the loop has no upper bound

Gradient
- forward finite difference with h = 1e-10, never central difference
"""
