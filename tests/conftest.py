import pytest


@pytest.fixture
def sales_csv_text():
    return (
        "Region,Product,Quantity,Note\n"
        "North,Widget,3,\n"
        "South,Gadget,5,\"fragile, handle with care\"\n"
        "\n"
        "North,Widget,3,\n"
        "East,Widget,x\n"
        "North,Gizmo,7,  \n"
    )
