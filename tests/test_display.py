import io

from lookpath.display import display_paths, display_tree
from lookpath.labels import LabelStack


def _stack():
    stack = LabelStack()
    stack.push_item("ls")
    stack.push_item("lsblk")
    stack.push_label("/bin", 0, 2)
    stack.push_item("lsof")
    stack.push_label("/usr/sbin", 2, 1)
    return stack


def test_display_tree():
    out = io.StringIO()
    display_tree(out, _stack())
    assert out.getvalue() == (
        "/bin:\n"
        "├─ ls\n"
        "└─ lsblk\n"
        "/usr/sbin:\n"
        "└─ lsof\n"
    )


def test_display_paths():
    out = io.StringIO()
    display_paths(out, _stack())
    assert out.getvalue() == "/bin/ls\n/bin/lsblk\n/usr/sbin/lsof\n"


def test_empty_stack_prints_nothing():
    tree, paths = io.StringIO(), io.StringIO()
    display_tree(tree, LabelStack())
    display_paths(paths, LabelStack())
    assert tree.getvalue() == ""
    assert paths.getvalue() == ""


def test_unlabelled_items_are_not_shown():
    stack = LabelStack()
    stack.push_item("ls")
    out = io.StringIO()
    display_paths(out, stack)
    assert out.getvalue() == ""


def test_line_counts_match_items():
    stack = _stack()
    tree, paths = io.StringIO(), io.StringIO()
    display_tree(tree, stack)
    display_paths(paths, stack)
    assert len(paths.getvalue().splitlines()) == len(stack.items)
    assert len(tree.getvalue().splitlines()) == len(stack.items) + len(stack.labels)