from billed.constants import BILL_TYPES, DEFAULT_PCT
from billed.models.bill import ALLOWED_FILE_TYPES
from billed.views.dom import Document, Element, FileInput, Form


def new_bill_ui() -> Document:
    """Mount the "Envoyer une note de frais" form."""
    form = Form(
        test_id="form-new-bill",
        children=[
            Element(
                "select",
                test_id="expense-type",
                name="type",
                value=BILL_TYPES[0],
                attributes={"options": "|".join(BILL_TYPES)},
            ),
            Element("input", test_id="expense-name", name="name", attributes={"placeholder": "Vol Paris Londres"}),
            Element("input", test_id="datepicker", name="date", attributes={"type": "date", "required": ""}),
            Element("input", test_id="amount", name="amount", attributes={"type": "number", "placeholder": "348", "required": ""}),
            Element("input", test_id="vat", name="vat", attributes={"type": "number", "placeholder": "70"}),
            Element("input", test_id="pct", name="pct", attributes={"type": "number", "placeholder": str(DEFAULT_PCT)}),
            Element("textarea", test_id="commentary", name="commentary"),
            FileInput(
                test_id="file",
                name="file",
                attributes={"type": "file", "accept": ",".join(sorted(ALLOWED_FILE_TYPES)), "required": ""},
            ),
            Element("button", test_id="btn-send-bill", attributes={"type": "submit"}, value="Envoyer"),
        ],
    )
    return Document(form)
