#! /usr/bin/env python
"""xCal (RFC 6321) element support"""

from lxml import etree

from .params import ICalDataType, ICalParameters


#: The xCal namespace
XCAL_NAMESPACE = "urn:ietf:params:xml:ns:icalendar-2.0"


def local_name(name):
    """Returns the xCal element name for *name*

    name
        A local element name (character string) or an
        :class:`params.ICalDataType` constant, which maps to the lower
        case name of the data type."""
    if isinstance(name, int):
        return ICalDataType.to_str_lower(name)
    return name


class XCalElement(object):

    """Wraps an xCal element

    element
        An :class:`lxml.etree._Element` instance.

    Children are accessed by local name or by data type, only children
    in the xCal namespace are considered."""

    def __init__(self, element):
        self.element = element

    @classmethod
    def new(cls, name):
        """Creates a new, detached xCal element called *name*"""
        return cls(etree.Element(cls.qname(name), nsmap={None: XCAL_NAMESPACE}))

    @classmethod
    def from_str(cls, src):
        """Parses an element from a string or bytes"""
        if isinstance(src, str):
            src = src.encode('utf-8')
        return cls(etree.fromstring(src))

    def to_str(self):
        return etree.tostring(self.element, encoding='unicode')

    @staticmethod
    def qname(name):
        return "{%s}%s" % (XCAL_NAMESPACE, local_name(name))

    def get_name(self):
        return etree.QName(self.element).localname

    def get_text(self):
        return self.element.text

    def append(self, name, text=None):
        """Appends a child element

        name
            A local name or :class:`params.ICalDataType` constant

        text
            Optional text content for the new element.

        Returns the new child as an XCalElement."""
        child = etree.SubElement(self.element, self.qname(name))
        if text is not None:
            child.text = text
        return XCalElement(child)

    def children(self, name):
        """Returns a list of the child elements called *name*"""
        return [XCalElement(child) for child in
                self.element.iterchildren(self.qname(name))]

    def first(self, name):
        """Returns the text of the first child called *name*

        Returns None if there is no such child.  An empty child element
        returns an empty string."""
        child = self.element.find(self.qname(name))
        if child is None:
            return None
        return child.text or ''

    def all(self, name):
        """Returns a list of the text of all children called *name*"""
        return [child.text or '' for child in
                self.element.iterchildren(self.qname(name))]

    def parameters(self):
        """Reads the xCal parameters of this property element

        Each child of the <parameters> element is a parameter, the text
        of each of its (value) children is a parameter value."""
        result = ICalParameters()
        for block in self.children("parameters"):
            for param in block.element.iterchildren(etree.Element):
                name = etree.QName(param).localname
                result.put_all(name, [value.text or '' for value in
                                      param.iterchildren(etree.Element)])
        return result

    def set_parameters(self, parameters):
        """Writes *parameters* as an xCal <parameters> element

        Values are written as <text> children.  Does nothing if there
        are no parameters."""
        for old in self.element.findall(self.qname("parameters")):
            self.element.remove(old)
        if not len(parameters):
            return
        block = etree.SubElement(self.element, self.qname("parameters"))
        # parameters must precede the value elements
        self.element.insert(0, block)
        block = XCalElement(block)
        for name, values in parameters.items():
            param = block.append(name.lower())
            for value in values:
                param.append(ICalDataType.TEXT, value)
