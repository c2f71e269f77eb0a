"""A few general utilities functions."""

import inspect
import re


def class_name_from_str(class_str):
    """Return a class name based on given string.

    Assumes all class names are properly named with Camel Caps.

    Used to generalize how classes can be identified by also allowing
    capitalized words in class name to be separated by a hyphen and also
    allowing capitalization to be ignored.

    i.e. all of the following are valid strings for class ColumnTable:
    'ColumnTable', 'Column-Table', 'column-table', 'Column-table', etc

    Args:
        class_str (str):
            string identifying a class name.
    Returns: str
        class name in camel caps
    """
    return "".join(
        [
            s.capitalize()
            for sub in class_str.split("-")
            for s in re.findall("[a-zA-Z][^A-Z]*", sub)
        ]
    )


def get_subclasses(base_class):
    """Get all non-abstract subclasses of a class.

    Gets all non-abstract classes that inherit from the given base class in
    a module. Classes are returned in definition order, parents first.
    """
    sub_classes = {}
    for sub_class in base_class.__subclasses__():
        if not inspect.isabstract(sub_class):
            sub_classes[sub_class.__name__] = sub_class
        sub_classes.update(get_subclasses(sub_class))

    return sub_classes


def get_subclasses_str(base_class, lower=True, split=True):
    """Get names of all non-abstract subclasses of a class.

    Args:
        base_class (object): base class to get subclasses of
        lower (bool): whether to return names in lower case
        split (bool): whether to split the class name and add hyphens between words
    """
    names = get_subclasses(base_class).keys()

    if split:
        names = tuple("-".join(re.findall("[A-Z][^A-Z]*", name)) for name in names)
    if lower:
        names = tuple(name.lower() for name in names)
    return tuple(names)
