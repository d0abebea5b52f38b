# -*- coding: utf-8 -*-
"""
Criteria Aggregator
===================

Combines mapped and normalised attributes into the three composite
criteria with fixed domain weights:

    Criticality = 0.78·Risk + 0.22·Fluctuation
    Demand      = 0.71·NormUsage + 0.29·NormStock
    Supply      = 0.75·NormLeadTime + 0.25·Consignment
"""

from types import MappingProxyType

import pandas as pd


AGGREGATE_WEIGHTS = MappingProxyType({
    "Criticality_Agg": (("Risk_Score", 0.78), ("Fluctuation_Score", 0.22)),
    "Demand_Agg": (("Norm_Usage", 0.71), ("Norm_Stock", 0.29)),
    "Supply_Agg": (("Norm_LeadTime", 0.75), ("Consignment_Score", 0.25)),
})


def aggregate_criteria(mapped: pd.DataFrame, normalized: pd.DataFrame) -> pd.DataFrame:
    """
    Parameters
    ----------
    mapped : pd.DataFrame
        Output of ``map_criteria``
    normalized : pd.DataFrame
        Output of ``normalize_quantities`` on the same index

    Returns
    -------
    pd.DataFrame
        ``Criticality_Agg``, ``Demand_Agg``, ``Supply_Agg``
    """
    inputs = pd.concat([mapped, normalized], axis=1)
    out = {}
    for name, ((first, w1), (second, w2)) in AGGREGATE_WEIGHTS.items():
        out[name] = w1 * inputs[first].to_numpy(dtype=float) \
            + w2 * inputs[second].to_numpy(dtype=float)
    return pd.DataFrame(out, index=mapped.index)
