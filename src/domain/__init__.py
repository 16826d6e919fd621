"""Domain layer - locations, images, hardware, nodes and template resolution."""
