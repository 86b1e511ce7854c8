from __future__ import annotations

# In-memory demo records, keyed the way the front end's mock data is.

INSTANCE_ID = "inst-greenscape"

PEOPLE = [
    {"id": "person-1", "name": "Sarah Johnson", "email": "sarah@greenscape.example", "role": "Operations Manager", "roleId": "role-ops", "instanceId": INSTANCE_ID},
    {"id": "person-2", "name": "Mike Chen", "email": "mike@greenscape.example", "role": "Field Supervisor", "roleId": "role-supervisor", "instanceId": INSTANCE_ID},
    {"id": "person-3", "name": "Carlos Rivera", "email": "carlos@greenscape.example", "role": "Landscape Technician", "roleId": "role-tech", "instanceId": INSTANCE_ID},
    {"id": "person-4", "name": "Emily Davis", "email": "emily@greenscape.example", "role": "Irrigation Specialist", "roleId": "role-tech", "instanceId": INSTANCE_ID},
]

PROJECTS = [
    {
        "id": "proj-1",
        "name": "Downtown Office Complex Landscaping",
        "description": "Complete landscape renovation for downtown office complex",
        "instanceId": INSTANCE_ID,
        "customerName": "Metro Properties LLC",
        "status": "active",
        "startDate": "2025-01-06",
        "endDate": "2025-03-28",
        "budget": 75000,
        "assignedTo": ["person-1", "person-2", "person-3"],
        "progress": 35,
        "priority": "high",
    },
    {
        "id": "proj-2",
        "name": "Riverside Park Restoration",
        "description": "Native planting and erosion control along the river trail",
        "instanceId": INSTANCE_ID,
        "customerName": "City of Riverside",
        "status": "planning",
        "startDate": "2025-01-27",
        "endDate": "2025-02-14",
        "budget": 42000,
        "assignedTo": ["person-2", "person-4"],
        "progress": 0,
        "priority": "medium",
    },
    {
        "id": "proj-3",
        "name": "Harbor View HOA Irrigation Upgrade",
        "description": "Replace controllers and retrofit drip zones",
        "instanceId": INSTANCE_ID,
        "customerName": "Harbor View HOA",
        "status": "on-hold",
        "startDate": "2025-01-15",
        "endDate": "2025-01-24",
        "budget": 18500,
        "assignedTo": ["person-4"],
        "progress": 20,
        "priority": "critical",
    },
]

WORK_ORDERS = [
    {
        "id": "wo-1",
        "projectId": "proj-1",
        "instanceId": INSTANCE_ID,
        "customerName": "Metro Properties LLC",
        "title": "Install new irrigation system",
        "description": "Install and test new smart irrigation system in Zone A",
        "status": "scheduled",
        "priority": "high",
        "location": "Zone A - East Courtyard",
        "assignedTo": ["person-2", "person-3"],
        "assignedRoles": ["role-supervisor", "role-tech"],
        "scheduledDate": "2025-01-21",
        "scheduledTime": "08:00 AM",
        "activityLevel": "high",
        "estimatedDuration": 4,
        "isRecurring": False,
    },
    {
        "id": "wo-2",
        "projectId": "proj-1",
        "instanceId": INSTANCE_ID,
        "customerName": "Metro Properties LLC",
        "title": "Lawn maintenance",
        "description": "Weekly lawn mowing and trimming",
        "status": "completed",
        "priority": "medium",
        "location": "Main Grounds",
        "assignedTo": ["person-3"],
        "assignedRoles": [],
        "scheduledDate": "2025-01-20",
        "scheduledTime": "07:00 AM",
        "completedDate": "2025-01-20",
        "completedBy": "person-3",
        "activityLevel": "medium",
        "estimatedDuration": 2,
        "actualDuration": 1.75,
        "isRecurring": True,
        "recurringTaskId": "rt-1",
    },
    {
        "id": "wo-3",
        "projectId": "proj-3",
        "instanceId": INSTANCE_ID,
        "customerName": "Harbor View HOA",
        "title": "Controller replacement - Building C",
        "description": "Swap legacy timers for smart controllers",
        "status": "in-progress",
        "priority": "critical",
        "location": "Building C Utility Room",
        "assignedTo": ["person-4"],
        "assignedRoles": ["role-tech"],
        "scheduledDate": "2025-01-22",
        "scheduledTime": "09:30 AM",
        "activityLevel": "high",
        "estimatedDuration": 6,
        "isRecurring": False,
    },
    {
        "id": "wo-4",
        "instanceId": INSTANCE_ID,
        "customerName": "Oakwood Medical Center",
        "title": "Storm debris cleanup",
        "description": "Remove fallen branches from parking areas",
        "status": "pending-approval",
        "priority": "low",
        "location": "North Parking Lot",
        "assignedTo": ["person-3"],
        "assignedRoles": [],
        "scheduledDate": "2025-01-24",
        "activityLevel": "low",
        "estimatedDuration": 3,
        "isRecurring": False,
    },
    {
        "id": "wo-5",
        "projectId": "proj-2",
        "instanceId": INSTANCE_ID,
        "customerName": "City of Riverside",
        "title": "Site survey",
        "description": "Survey erosion points before planting",
        "status": "draft",
        "priority": "medium",
        "location": "Riverside Trail Mile 2",
        "assignedTo": ["person-2"],
        "assignedRoles": [],
        "scheduledDate": "2025-01-27",
        "activityLevel": "medium",
        "estimatedDuration": 5,
        "isRecurring": False,
    },
]

RECURRING_TASKS = [
    {
        "id": "rt-1",
        "instanceId": INSTANCE_ID,
        "projectId": "proj-1",
        "customerName": "Metro Properties LLC",
        "title": "Weekly Lawn Maintenance",
        "description": "Mow, edge, and trim all lawn areas",
        "frequency": "weekly",
        "frequencyDetails": "Every Monday",
        "startDate": "2025-01-06",
        "assignedTo": ["person-3"],
        "assignedRoles": ["role-tech"],
        "estimatedDuration": 2,
        "activityLevel": "medium",
        "nextOccurrence": "2025-01-27",
        "completionHistory": [
            {"date": "2025-01-20", "workOrderId": "wo-2", "completedBy": "person-3", "duration": 1.75},
        ],
    },
    {
        "id": "rt-2",
        "instanceId": INSTANCE_ID,
        "customerName": "Oakwood Medical Center",
        "title": "Irrigation Inspection",
        "description": "Check heads, valves and controller schedules",
        "frequency": "monthly",
        "frequencyDetails": "Third Tuesday",
        "startDate": "2024-11-19",
        "endDate": "2025-12-31",
        "assignedTo": ["person-4"],
        "assignedRoles": [],
        "estimatedDuration": 1.5,
        "activityLevel": "low",
        "nextOccurrence": "2025-01-21",
        "completionHistory": [],
    },
    {
        "id": "rt-3",
        "instanceId": INSTANCE_ID,
        "customerName": "Harbor View HOA",
        "title": "Pool Area Planter Care",
        "description": "Deadhead, fertilize and refresh mulch",
        "frequency": "bi-weekly",
        "startDate": "2025-01-09",
        "assignedTo": ["person-3"],
        "assignedRoles": [],
        "estimatedDuration": 1,
        "activityLevel": "medium",
        "nextOccurrence": "2025-01-23",
        "completionHistory": [],
    },
]
