# Tag classification tables consumed by rich-text importers that walk the markup with the lexical patterns
# from `html_prep.patterns`.
from __future__ import annotations

__all__ = [
    'BLOCK',
    'CLOSE_SELF',
    'EMPTY',
    'FILL_ATTRS',
    'FILTER_ATTRS',
    'INLINE',
    'SPECIAL',
    'is_block',
    'is_close_self',
    'is_empty',
    'is_inline',
    'is_special',
    'make_map',
]


def make_map(names: str) -> frozenset[str]:
    """Build a membership set from a comma-separated list of names.

    Names are taken as given, no whitespace stripping or case folding happens. Note that an empty string
    produces a set containing the empty string, not an empty set.

    Args:
        names: Comma-separated names, e.g. `'a,b,c'`.

    Returns:
        Frozen set with every name from the list.
    """
    return frozenset(names.split(','))


# Void elements, HTML 5
EMPTY = make_map('area,base,basefont,br,col,frame,hr,img,input,link,meta,param,embed,command,keygen,source,track,wbr')

# Block elements. The list follows rich-text editor heuristics rather than the HTML standard, so some
# historically inline elements (`code`, `input`, `br`) are here too.
BLOCK = make_map(
    'input,textarea,br,code,address,article,applet,aside,audio,blockquote,canvas,center,dd,dir,div,dl,dt,fieldset,'
    'figcaption,figure,footer,form,frameset,h1,h2,h3,h4,h5,h6,header,hgroup,hr,iframe,ins,isindex,li,map,menu,'
    'noframes,noscript,ol,output,p,pre,section,script,table,tbody,td,tfoot,th,thead,tr,ul,video'
)

# Inline elements, HTML 5
INLINE = make_map(
    'img,a,abbr,acronym,b,basefont,bdo,big,button,cite,del,dfn,em,font,i,iframe,ins,kbd,label,object,q,s,samp,'
    'script,select,small,span,strike,strong,sub,sup,tt,u,var'
)

# Elements that may be left open, a following sibling or the parent close ends them
CLOSE_SELF = make_map('colgroup,dd,dt,li,options,p,td,tfoot,th,thead,tr')

# Boolean attributes whose value mirrors the name, e.g. disabled="disabled"
FILL_ATTRS = make_map(
    'checked,compact,declare,defer,disabled,ismap,multiple,nohref,noresize,noshade,nowrap,readonly,selected'
)

# Attributes dropped once a node is converted
FILTER_ATTRS = make_map('style,class')

# Raw-text elements, their content is never read as markup
SPECIAL = make_map('script,style')


def is_empty(tag_name: str) -> bool:
    """Check whether the tag is a void element."""
    return tag_name in EMPTY


def is_block(tag_name: str) -> bool:
    """Check whether the tag is a block element."""
    return tag_name in BLOCK


def is_inline(tag_name: str) -> bool:
    """Check whether the tag is an inline element."""
    return tag_name in INLINE


def is_close_self(tag_name: str) -> bool:
    return tag_name in CLOSE_SELF


def is_special(tag_name: str) -> bool:
    return tag_name in SPECIAL
