"""
Description:
Reference keyword table for content scoring.

Each topic label is matched case-insensitively against the interview question;
its keywords are matched case-insensitively against the candidate's answer.
Keyword order is significant: strengths and improvements cite keywords in the
order listed here.

Keywords are substring-matched, so no keyword may contain another keyword of
the same topic. The Gustilo grades are therefore keyed on what defines each
grade (Type I to Type IIIC in order), not on the grade names.

Author: @kcaparas1630
"""

DEFAULT_KEYWORD_TABLE = {
    "gustilo classification": [
        "minimal contamination",
        "moderate soft tissue",
        "adequate soft tissue",
        "flap coverage",
        "vascular injury",
    ],
    "mangled extremity": [
        "mess score",
        "limb salvage",
        "amputation",
        "vascular",
        "debridement",
        "soft tissue",
    ],
    "hip fracture": [
        "femoral neck",
        "intertrochanteric",
        "garden classification",
        "hemiarthroplasty",
        "total hip arthroplasty",
        "dynamic hip screw",
        "intramedullary nail",
        "early mobilization",
    ],
    "supracondylar fracture": [
        "gartland",
        "neurovascular",
        "anterior interosseous",
        "closed reduction",
        "percutaneous pinning",
        "compartment syndrome",
    ],
    "radius fracture": [
        "colles",
        "radial height",
        "radial inclination",
        "volar tilt",
        "closed reduction",
        "volar plate",
        "cast",
    ],
    "tibial plateau fracture": [
        "schatzker",
        "ct scan",
        "articular surface",
        "compartment syndrome",
        "external fixation",
        "orif",
        "bone graft",
    ],
}
