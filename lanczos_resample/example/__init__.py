# -*- coding: utf-8 -*-
"""
Example - Command-line harnesses that resample test signals to ``.dat``.

- ``lanczos_test``: fixed 10-sample signal, up 2x and down 2x.
- ``sine_test``: one sine period on a regular grid, ``SRC_W -> DST_W``.
- ``irregular_sine_test``: random sine samples onto ``DST_W`` points.

Every harness writes ``x value`` lines and can plot its results with
matplotlib (``--plot``).

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""
