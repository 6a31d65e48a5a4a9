from translation_node.main import run

run()
