"""lecturelens: silence, importance and concept density analysis for recorded lectures."""
