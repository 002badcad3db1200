"""
Compander - per-pitch and global MIDI velocity compression.

Compander evens out (or exaggerates) the dynamics of the selected notes in
an editor's take. It works in two passes:

- **Per pitch.** Selected notes are grouped by pitch and each group is pulled
  toward its own average velocity. A hi-hat line gets more even without
  being dragged toward the kick drum's level.
- **Globally.** All selected notes are then pulled toward the average of the
  whole selection, working on the velocities the first pass produced.

Rates are percentages. 100 flattens every note to the average, 50 halves
each note's distance from it, and negative values push notes away from the
average (expansion). Results are rounded half away from zero and kept
within 0-127. The per-pitch rate is capped at 100 so that notes of one
pitch never swap loudness order; the global rate is applied as given.

Any editor can drive it through the small ``compander.host.Host``
protocol. ``EditorHost`` is an in-memory implementation:

    ```python
    import compander

    take = compander.Take()
    for velocity in (40, 60, 80):
        take.add_note(position=0, pitch=60, velocity=velocity, duration=24, selected=True)

    host = compander.EditorHost()
    host.open_editor(take)

    compander.run(host, pitch_rate=50, global_rate=0)
    take.velocities()  # [50, 60, 70]
    ```

Run ``python -m compander`` for an interactive demo on a drum take.

Package-level exports: ``EditorHost``, ``Take``, ``compress_velocities``, ``run``.
"""

import compander.compressor
import compander.host
import compander.runner
import compander.take


EditorHost = compander.host.EditorHost
Take = compander.take.Take
compress_velocities = compander.compressor.compress_velocities
run = compander.runner.run
