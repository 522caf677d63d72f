"""KitchenMate web surface."""
