"""Commands without arguments, each rendered as ``<tag><keyword>`` on its own line."""

from __future__ import annotations

from dataclasses import dataclass

from .directive import Marker
from .kinds import Kind


# call graphs and references
@dataclass(frozen=True)
class Callergraph(Marker):
    kind = Kind.CALLERGRAPH


@dataclass(frozen=True)
class Callgraph(Marker):
    kind = Kind.CALLGRAPH


@dataclass(frozen=True)
class Hidecallergraph(Marker):
    kind = Kind.HIDECALLERGRAPH


@dataclass(frozen=True)
class Hidecallgraph(Marker):
    kind = Kind.HIDECALLGRAPH


@dataclass(frozen=True)
class Hiderefby(Marker):
    kind = Kind.HIDEREFBY


@dataclass(frozen=True)
class Hiderefs(Marker):
    kind = Kind.HIDEREFS


@dataclass(frozen=True)
class Showrefby(Marker):
    kind = Kind.SHOWREFBY


@dataclass(frozen=True)
class Showrefs(Marker):
    kind = Kind.SHOWREFS


@dataclass(frozen=True)
class Hideinitializer(Marker):
    kind = Kind.HIDEINITIALIZER


@dataclass(frozen=True)
class Showinitializer(Marker):
    kind = Kind.SHOWINITIALIZER


# visibility and member attributes
@dataclass(frozen=True)
class Private(Marker):
    kind = Kind.PRIVATE


@dataclass(frozen=True)
class Privatesection(Marker):
    kind = Kind.PRIVATESECTION


@dataclass(frozen=True)
class Protected(Marker):
    kind = Kind.PROTECTED


@dataclass(frozen=True)
class Protectedsection(Marker):
    kind = Kind.PROTECTEDSECTION


@dataclass(frozen=True)
class Public(Marker):
    kind = Kind.PUBLIC


@dataclass(frozen=True)
class Publicsection(Marker):
    kind = Kind.PUBLICSECTION


@dataclass(frozen=True)
class Pure(Marker):
    kind = Kind.PURE


@dataclass(frozen=True)
class Static(Marker):
    kind = Kind.STATIC


@dataclass(frozen=True)
class Nosubgrouping(Marker):
    kind = Kind.NOSUBGROUPING


@dataclass(frozen=True)
class Internal(Marker):
    kind = Kind.INTERNAL


@dataclass(frozen=True)
class Tableofcontents(Marker):
    kind = Kind.TABLEOFCONTENTS


@dataclass(frozen=True)
class Vhdlflow(Marker):
    kind = Kind.VHDLFLOW


@dataclass(frozen=True)
class Secreflist(Marker):
    kind = Kind.SECREFLIST


@dataclass(frozen=True)
class Else(Marker):
    kind = Kind.ELSE


# closers
@dataclass(frozen=True)
class Endcode(Marker):
    kind = Kind.ENDCODE


@dataclass(frozen=True)
class Endcond(Marker):
    kind = Kind.ENDCOND


@dataclass(frozen=True)
class Enddocbookonly(Marker):
    kind = Kind.ENDDOCBOOKONLY


@dataclass(frozen=True)
class Enddot(Marker):
    kind = Kind.ENDDOT


@dataclass(frozen=True)
class Endhtmlonly(Marker):
    kind = Kind.ENDHTMLONLY


@dataclass(frozen=True)
class Endif(Marker):
    kind = Kind.ENDIF


@dataclass(frozen=True)
class Endinternal(Marker):
    kind = Kind.ENDINTERNAL


@dataclass(frozen=True)
class Endlatexonly(Marker):
    kind = Kind.ENDLATEXONLY


@dataclass(frozen=True)
class Endlink(Marker):
    kind = Kind.ENDLINK


@dataclass(frozen=True)
class Endmanonly(Marker):
    kind = Kind.ENDMANONLY


@dataclass(frozen=True)
class Endmsc(Marker):
    kind = Kind.ENDMSC


@dataclass(frozen=True)
class Endparblock(Marker):
    kind = Kind.ENDPARBLOCK


@dataclass(frozen=True)
class Endrtfonly(Marker):
    kind = Kind.ENDRTFONLY


@dataclass(frozen=True)
class Endsecreflist(Marker):
    kind = Kind.ENDSECREFLIST


@dataclass(frozen=True)
class Enduml(Marker):
    kind = Kind.ENDUML


@dataclass(frozen=True)
class Endverbatim(Marker):
    kind = Kind.ENDVERBATIM


@dataclass(frozen=True)
class Endxmlonly(Marker):
    kind = Kind.ENDXMLONLY
