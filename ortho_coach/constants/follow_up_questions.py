"""
Description:
Follow-up questions keyed by a trigger phrase found in the original question.

Triggers are checked in order and the first one contained in the lower-cased
question wins.

Author: @kcaparas1630
"""

FOLLOW_UP_TRIGGERS = (
    ("gustilo classification", "How would your management differ between a Type II and Type IIIB open fracture?"),
    ("mangled extremity", "What factors would push you toward amputation rather than limb salvage, and how would you discuss that decision with the patient?"),
    ("hip fracture", "How would your management change for a displaced femoral neck fracture in a 45-year-old compared with an 85-year-old?"),
    ("supracondylar fracture", "How would you manage a pulseless but well-perfused hand after reduction of a supracondylar fracture?"),
    ("radius fracture", "What radiographic parameters would make you recommend operative fixation of a distal radius fracture?"),
    ("tibial plateau fracture", "How would the presence of compartment syndrome change the timing of your definitive fixation?"),
    ("tell me about yourself", "What specific experiences shaped your interest in orthopedic surgery?"),
    ("why orthopedics", "Can you describe a patient encounter that confirmed orthopedics was the right specialty for you?"),
)

DEFAULT_FOLLOW_UP = (
    "Based on your interest in orthopedic surgery, can you describe a challenging case "
    "you've observed and what you learned from it?"
)
