from flashfreq.data_model import TabularModel


def column_model(values, header="col"):
    """Single-column table holding *values* in file order."""
    return TabularModel(headers=(header,), rows=tuple((v,) for v in values))
