# api - REST interface for beamcalc
