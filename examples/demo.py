from pathlib import Path

from flowdiagram import FlowBuilder, RenderOptions, TextExporter, render, validate


def main():
    print("Building diagram...")
    builder = FlowBuilder("Pizza Order")

    start = builder.start("Start", style={"backgroundColor": "#e8f5e8", "borderColor": "#4caf50"})

    choose_pizza = builder.action("Choose Pizza")
    builder.connect(start, choose_pizza)

    is_delivery = builder.decision("Is it delivery?")
    builder.connect(choose_pizza, is_delivery)

    enter_address = builder.action("Enter Address")
    builder.connect(is_delivery, enter_address, label="Yes")

    takeout = builder.action("Go to shop")
    builder.connect(is_delivery, takeout, label="No")

    pay = builder.action("Pay")
    builder.connect(enter_address, pay)
    builder.connect(takeout, pay)

    end = builder.end("Enjoy Pizza")
    builder.connect(pay, end)

    diagram = builder.build(layout="hierarchical")
    print(f"Diagram built with {diagram.node_count} nodes and {diagram.edge_count} edges.")
    print(f"Valid: {validate(diagram).is_valid}")

    out_dir = Path(__file__).parent / "output"
    out_dir.mkdir(exist_ok=True)
    for fmt, ext in (("svg", "svg"), ("html", "html"), ("mermaid", "mmd"), ("dot", "dot"), ("json", "json")):
        path = out_dir / f"pizza.{ext}"
        path.write_text(render(diagram, RenderOptions(format=fmt, theme="light")), encoding="utf-8")
        print(f"  wrote {path}")

    dark = out_dir / "pizza_dark.svg"
    dark.write_text(render(diagram, RenderOptions(theme="dark", orientation="horizontal")), encoding="utf-8")
    print(f"  wrote {dark}")

    print()
    print(TextExporter.to_text(diagram))


if __name__ == "__main__":
    main()
