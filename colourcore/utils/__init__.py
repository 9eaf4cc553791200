from .num_utils import clamp01, clamp_byte, round_half_up, round_to_byte, unit_to_byte, byte_to_unit, alpha_to_byte
