"""Qt item models backed by the tracker."""
