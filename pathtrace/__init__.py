"""
PathTrace: step-by-step shortest-path traces.

Runs Dijkstra, Bellman-Ford and Floyd-Warshall over a small directed
weighted graph and records every visit, relaxation and distance update
so the run can be replayed like a timeline.
"""

__version__ = "0.1.0"
