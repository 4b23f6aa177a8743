"""External interfaces for MAVBot."""
