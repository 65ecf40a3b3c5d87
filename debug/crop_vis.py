import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from plotforge import Polygon, Segment, multiline, rect

from plot_geometry import plot_crop

# Comb-shaped frame with two notches
frame = Polygon([(0, 0), (1, 0), (1, 3), (2, 3), (2, 0), (5, 0), (5, 4), (4, 4), (4, 1), (3, 1), (3, 5), (0, 5)])

plot_crop(Segment((0, 2), (5, 2)), frame, title="Segment through notches")
plot_crop(multiline([(-1, 0.5), (2.5, 2.5), (6, 0.5)]), frame, title="Multiline through notches")
plot_crop(rect((0.5, 1.5), 4, 1), frame, title="Rectangle through notches")
