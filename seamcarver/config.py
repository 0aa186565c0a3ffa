"""Global configuration for seamcarver."""

import torch


class Config:
    """Global configuration."""

    # Energy
    BORDER_ENERGY = 1000.0  # Fixed energy of every border pixel
    ENERGY_DTYPE = torch.float64

    # Logging
    LOG_LEVEL = 'INFO'
