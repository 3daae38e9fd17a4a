from jinja2 import Environment, PackageLoader, select_autoescape

env = Environment(
    loader=PackageLoader("mdpreview", "templates"),
    autoescape=select_autoescape(["html", "xml"]),
)

document_template = env.get_template("document.html")
