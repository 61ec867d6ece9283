"""Physical constants used throughout MoistAir.

All values in SI units (kPa, K, kJ/kg) unless otherwise noted.
"""

# Thermodynamic
T_CELSIUS_OFFSET = 273.15  # K — triple-point boundary used by the correlations
P_ATM = 101.325  # kPa — standard atmospheric pressure

# Saturation correlation validity (open interval)
T_SAT_MIN = 173.15  # K (-100 °C)
T_SAT_MAX = 473.15  # K (200 °C)

# Moist air
MW_RATIO = 0.621945  # — molar mass ratio water vapour / dry air
R_DRY_AIR = 0.287042  # kJ/(kg·K) — specific gas constant of dry air
VOLUME_FACTOR = 1.607858  # — 1 / MW_RATIO, specific volume correction

# Enthalpy
CP_DRY_AIR = 1.006  # kJ/(kg·K)
CP_VAPOR = 1.86  # kJ/(kg·K)
H_FG_0 = 2501.0  # kJ/kg — latent heat of vaporisation at 0 °C

# Wetbulb enthalpy balance, liquid water on the bulb
CP_LIQUID = 4.186  # kJ/(kg·K)
WBT_LIQUID_SLOPE = 2.326  # kJ/(kg·K)

# Wetbulb enthalpy balance, ice on the bulb
H_SG_0 = 2830.0  # kJ/kg — latent heat of sublimation at 0 °C
CP_ICE = 2.1  # kJ/(kg·K)
WBT_ICE_SLOPE = 0.24  # kJ/(kg·K)
