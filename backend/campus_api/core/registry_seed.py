"""Registry Seed — the built-in catalogue loaded when no data file is configured.

Invariants:
    - Seed enrolled counts are applied with set_enrolled_student_count, so a seeded
      course may start above capacity (the catalogue mirrors registrar exports)
    - build_seed_departments returns fresh objects on every call
"""

from campus_api.core.registry_entities import Course, Department

# dept_code -> (chair, majors, [(course_code, instructor, location, time, capacity, enrolled)])
_CATALOGUE: dict[str, tuple[str, int, list[tuple[str, str, str, str, int, int]]]] = {
    "COMS": ("Luca Carloni", 2700, [
        ("1004", "Adam Cannon", "417 IAB", "11:40-12:55", 400, 249),
        ("3134", "Brian Borowski", "301 URIS", "4:10-5:25", 250, 242),
        ("3157", "Jae Lee", "417 IAB", "4:10-5:25", 400, 311),
        ("3203", "Ansaf Salleb-Aouissi", "301 URIS", "10:10-11:25", 250, 215),
        ("3261", "Josh Alman", "417 IAB", "2:40-3:55", 150, 140),
        ("3251", "Tony Dear", "402 CHANDLER", "1:10-3:40", 125, 99),
        ("3827", "Daniel Rubenstein", "207 Math", "10:10-11:25", 300, 283),
        ("4156", "Gail Kaiser", "501 NWC", "10:10-11:25", 120, 109),
    ]),
    "ECON": ("Michael Woodford", 2345, [
        ("1105", "Waseem Noor", "309 HAV", "2:40-3:55", 210, 187),
        ("2257", "Tamrat Gashaw", "428 PUP", "10:10-11:25", 125, 63),
        ("3211", "Murat Yilmaz", "310 FAY", "4:10-5:25", 96, 81),
        ("3213", "Miles Leahey", "702 HAM", "4:10-5:25", 86, 77),
        ("3412", "Thomas Piskula", "702 HAM", "11:40-12:55", 86, 81),
        ("4415", "Evan D Sadler", "309 HAV", "10:10-11:25", 110, 63),
        ("4710", "Matthieu Gomez", "517 HAM", "8:40-9:55", 86, 37),
        ("4840", "Mark Dean", "142 URIS", "2:40-3:55", 108, 67),
    ]),
    "IEOR": ("Jay Sethuraman", 67, [
        ("2500", "Uday Menon", "627 MUDD", "11:40-12:55", 50, 52),
        ("3404", "Christopher J Dolan", "303 MUDD", "10:10-11:25", 73, 80),
        ("3658", "Daniel Lacker", "310 FAY", "10:10-11:25", 96, 87),
        ("4102", "Antonius B Dieker", "209 HAM", "10:10-11:25", 110, 92),
        ("4106", "Kaizheng Wang", "501 NWC", "10:10-11:25", 150, 161),
        ("4405", "Yuri Faenza", "517 HAV", "11:40-12:55", 80, 19),
        ("4511", "Michael Robbins", "633 MUDD", "9:00-11:30", 150, 50),
        ("4540", "Krzysztof M Choromanski", "633 MUDD", "7:10-9:40", 60, 33),
    ]),
    "CHEM": ("Laura J. Kaufman", 250, [
        ("1403", "Ruben M Savizky", "309 HAV", "6:10-7:25", 120, 81),
        ("1500", "Joseph C Ulichny", "302 HAV", "6:10-9:50", 46, 29),
        ("2045", "Luis M Campos", "209 HAV", "1:10-2:25", 50, 29),
        ("2494", "Talha Siddiqui", "202 HAV", "1:10-5:00", 24, 18),
        ("3080", "Milan Delor", "209 HAV", "10:10-11:25", 60, 18),
        ("4071", "Jonathan S Owen", "320 HAV", "8:40-9:55", 42, 29),
        ("4102", "Dalibor Sames", "320 HAV", "10:10-11:25", 28, 27),
    ]),
    "PHYS": ("Dmitri N. Basov", 43, [
        ("1001", "Szabolcs Marka", "301 PUP", "2:40-3:55", 150, 131),
        ("1201", "Eric Raymer", "428 PUP", "2:40-3:55", 145, 130),
        ("1602", "Kerstin M Perez", "428 PUP", "10:10-11:25", 140, 77),
        ("2802", "Yury Levin", "329 PUP", "10:10-12:00", 60, 19),
        ("3008", "William A Zajc", "329 PUP", "10:10-11:25", 75, 60),
        ("4003", "Frederik Denef", "214 PUP", "4:10-5:25", 50, 18),
        ("4018", "Andrew Millis", "329 PUP", "8:40-9:55", 30, 1),
        ("4040", "Lam Hui", "329 PUP", "1:10-2:25", 35, 31),
    ]),
    "ELEN": ("Ioannis Kymissis", 250, [
        ("1201", "David G Vallancourt", "301 PUP", "1:10-2:25", 120, 108),
        ("3082", "Kenneth Shepard", "1205 MUDD", "4:10-6:40", 32, 4),
        ("3331", "David G Vallancourt", "203 MATH", "11:40-12:55", 80, 76),
        ("3401", "Keren Bergman", "829 MUDD", "2:40-3:55", 40, 27),
        ("3701", "Irving Kalet", "333 URIS", "2:40-3:55", 50, 24),
        ("4510", "Mohamed Kamaludeen", "903 SSW", "7:00-9:30", 30, 22),
        ("4702", "Alexei Ashikhmin", "332 URIS", "7:00-9:30", 50, 5),
        ("4830", "Christine P Hendon", "633 MUDD", "10:10-11:25", 60, 22),
    ]),
    "PSYC": ("Nim Tottenham", 437, [
        ("1001", "Patricia G Lindemann", "501 SCH", "1:10-2:25", 200, 191),
        ("1610", "Christopher Baldassano", "200 SCH", "10:10-11:25", 45, 42),
        ("2235", "Katherine T Fox-Glassman", "501 SCH", "11:40-12:55", 125, 128),
        ("2620", "Jeffrey M Cohen", "303 URIS", "1:10-3:40", 60, 55),
        ("3212", "Mayron Piccolo", "200 SCH", "2:10-4:00", 15, 15),
        ("3445", "Mariam Aly", "405 SCH", "2:10-4:00", 12, 12),
        ("4236", "Trenton Jerde", "405 SCH", "6:10-8:00", 18, 17),
        ("4493", "Jennifer Blaze", "200 SCH", "2:10-4:00", 15, 9),
    ]),
}


def build_seed_departments() -> list[Department]:
    """Fresh Department objects for the built-in catalogue."""
    departments = []
    for dept_code, (chair, majors, rows) in _CATALOGUE.items():
        department = Department(
            dept_code=dept_code,
            department_chair=chair,
            number_of_majors=majors,
        )
        for code, instructor, location, time_slot, capacity, enrolled in rows:
            course = Course(instructor, location, time_slot, capacity)
            course.set_enrolled_student_count(enrolled)
            department.add_course(code, course)
        departments.append(department)
    return departments
